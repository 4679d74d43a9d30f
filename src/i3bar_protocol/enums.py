"""Closed vocabularies used by blocks and click events.

MouseButton travels as an integer code and is decoded permissively: hosts may send codes this
package does not know, and those become UNKNOWN. Markup and Alignment travel as lowercase
strings and are strict.
"""

from enum import Enum, IntEnum
from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from i3bar_protocol.codec import json_kind
from i3bar_protocol.errors import InvalidData


class MouseButton(IntEnum):
    """Pointer button reported in a click event.

    Member values are the wire codes. UNKNOWN encodes as 0, so an unrecognized code does not
    survive a decode/encode cycle: 7 decodes to UNKNOWN and encodes back as 0.
    """

    UNKNOWN = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5
    BACK = 8
    FORWARD = 9

    @property
    def code(self) -> int:
        """Wire code of this button."""
        return int(self)


class Markup(str, Enum):
    """How the host interprets block text."""

    NONE = "none"
    PANGO = "pango"

    @property
    def symbol(self) -> str:
        """Wire string of this markup mode."""
        return self.value


class Alignment(str, Enum):
    """Horizontal alignment of block text inside its min_width."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def symbol(self) -> str:
        """Wire string of this alignment."""
        return self.value


_BUTTONS_BY_CODE = {button.code: button for button in MouseButton if button is not MouseButton.UNKNOWN}


def decode_mouse_button(value: object) -> MouseButton:
    """Decode a wire button code. Any integer is accepted; unknown codes become UNKNOWN.

    Raises:
        InvalidData: Value is not a JSON integer.

    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidData(f"invalid type: {json_kind(value)}, expected an integer button code")
    return _BUTTONS_BY_CODE.get(value, MouseButton.UNKNOWN)


def encode_mouse_button(button: MouseButton) -> int:
    """Encode a button as its wire code."""
    return button.code


def _decode_symbol[E: (Markup, Alignment)](enum_cls: type[E], value: object) -> E:
    if not isinstance(value, str):
        raise InvalidData(f"invalid type: {json_kind(value)}, expected a string")
    try:
        return enum_cls(value)
    except ValueError:
        expected = ", ".join(f"'{member.value}'" for member in enum_cls)
        raise InvalidData(f"unknown variant '{value}', expected one of {expected}") from None


def decode_markup(value: object) -> Markup:
    """Decode a wire markup string.

    Raises:
        InvalidData: Value is not a string, or not one of "none" / "pango".

    """
    return _decode_symbol(Markup, value)


def encode_markup(markup: Markup) -> str:
    """Encode a markup mode as its wire string."""
    return markup.symbol


def decode_alignment(value: object) -> Alignment:
    """Decode a wire alignment string.

    Raises:
        InvalidData: Value is not a string, or not one of "left" / "center" / "right".

    """
    return _decode_symbol(Alignment, value)


def encode_alignment(alignment: Alignment) -> str:
    """Encode an alignment as its wire string."""
    return alignment.symbol


# Field types for records: validate with the decoders above, serialize with the encoders.
MouseButtonField = Annotated[
    MouseButton, PlainValidator(decode_mouse_button), PlainSerializer(encode_mouse_button, return_type=int)
]
MarkupField = Annotated[Markup, PlainValidator(decode_markup), PlainSerializer(encode_markup, return_type=str)]
AlignmentField = Annotated[
    Alignment, PlainValidator(decode_alignment), PlainSerializer(encode_alignment, return_type=str)
]

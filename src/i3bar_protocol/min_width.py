"""Polymorphic min_width value.

On the wire min_width is either a pixel count or an example string whose rendered width the host
uses as the minimum. Integers are matched first, then strings; anything else is rejected.
"""

from dataclasses import dataclass
from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from i3bar_protocol.codec import U32_MAX, json_kind
from i3bar_protocol.errors import InvalidData


@dataclass(frozen=True)
class Pixels:
    """Minimum width in pixels."""

    value: int

    def __post_init__(self) -> None:
        """Reject anything outside the u32 range.

        Raises:
            InvalidData: value is not an integer in 0..U32_MAX.

        """
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidData(f"invalid type: {json_kind(self.value)}, expected a pixel count")
        if not 0 <= self.value <= U32_MAX:
            raise InvalidData(f"invalid value: {self.value} pixels, expected 0..{U32_MAX}")


@dataclass(frozen=True)
class Example:
    """Minimum width given by the rendered width of this text."""

    text: str

    def __post_init__(self) -> None:
        """Reject non-string example text.

        Raises:
            InvalidData: text is not a string.

        """
        if not isinstance(self.text, str):
            raise InvalidData(f"invalid type: {json_kind(self.text)}, expected example text")


MinWidth = Pixels | Example


def decode_min_width(value: object) -> MinWidth:
    """Decode a wire min_width value.

    Integers above the u32 range saturate to U32_MAX. Strings are always examples, even when
    they look numeric. Already-built Pixels and Example values are returned unchanged; their
    constructors enforce the same ranges.

    Raises:
        InvalidData: Negative integer, non-integer number, or any other JSON kind.

    """
    if isinstance(value, (Pixels, Example)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise InvalidData(f"invalid value: integer {value}, expected a positive integer or a string")
        return Pixels(min(value, U32_MAX))
    if isinstance(value, str):
        return Example(value)
    raise InvalidData(f"invalid type: {json_kind(value)}, expected a positive integer or a string")


def encode_min_width(width: MinWidth) -> int | str:
    """Encode a min_width value: Pixels as a JSON integer, Example as a JSON string."""
    match width:
        case Pixels(value=pixels):
            return pixels
        case Example(text=text):
            return text


MinWidthField = Annotated[MinWidth, PlainValidator(decode_min_width), PlainSerializer(encode_min_width)]

"""Click event as sent by current bar hosts.

Only name and button are required. instance, x and y are each optional on the wire; the
protocol does not force x and y to travel together, so coordinates is reported only when both
are present.

Wire form: {"name":"ethernet","instance":"eth0","button":1,"x":1320,"y":1400}

Absent optional fields are left out of the encoding, never written as null:
{"name":"cpu","button":3}
"""

from typing import Self

from i3bar_protocol.codec import U32, WireRecord
from i3bar_protocol.enums import MouseButton, MouseButtonField


class ClickEvent(WireRecord):
    """Pointer interaction on a previously emitted block.

    to_json() omits instance, x and y when they are None instead of writing null.
    """

    name: str
    instance: str | None = None
    button: MouseButtonField
    x: U32 | None = None
    y: U32 | None = None

    @property
    def coordinates(self) -> tuple[int, int] | None:
        """(x, y) when both are present, otherwise None."""
        if self.x is None or self.y is None:
            return None
        return self.x, self.y


class ClickEventBuilder:
    """Builds a ClickEvent programmatically. Omitted parts stay absent."""

    def __init__(self, name: str, button: MouseButton) -> None:
        """Start an event for the block called name, clicked with button."""
        self._name = name
        self._button = button
        self._instance: str | None = None
        self._x: int | None = None
        self._y: int | None = None

    def instance(self, value: str | None) -> Self:
        """Set (or clear, with None) the block instance."""
        self._instance = value
        return self

    def coordinates(self, x: int, y: int) -> Self:
        """Set the pointer position."""
        self._x = x
        self._y = y
        return self

    def build(self) -> ClickEvent:
        """Freeze into a ClickEvent.

        Raises:
            InvalidData: A coordinate is outside the u32 range.

        """
        return ClickEvent.from_value(
            {"name": self._name, "instance": self._instance, "button": self._button, "x": self._x, "y": self._y}
        )

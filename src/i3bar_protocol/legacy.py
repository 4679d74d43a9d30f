"""Click event of the original protocol revision, where every field is mandatory.

Kept as a separate type from ClickEvent; there is no conversion between the two.
"""

from i3bar_protocol.codec import U32, WireRecord
from i3bar_protocol.enums import MouseButtonField


class LegacyClickEvent(WireRecord):
    """Click event whose coordinates and instance always accompany the click."""

    name: str
    instance: str
    button: MouseButtonField
    x: U32
    y: U32

    @property
    def coordinates(self) -> tuple[int, int]:
        """Pointer position as (x, y)."""
        return self.x, self.y

"""Status block: one segment of the status line.

Only full_text is required. urgent, separator, markup and align fall back to their defaults
when missing; every other optional field decodes to None, and encoding leaves None fields out
rather than writing null. Fields are not checked against each other (short_text may be longer
than full_text); that is for the host to render.
"""

from pydantic import Field

from i3bar_protocol.codec import U32, WireRecord
from i3bar_protocol.enums import Alignment, AlignmentField, Markup, MarkupField
from i3bar_protocol.min_width import MinWidthField


class Block(WireRecord):
    """One renderable segment, produced fresh on every update."""

    full_text: str
    name: str | None = None
    instance: str | None = None
    urgent: bool = False
    separator: bool = False
    markup: MarkupField = Markup.NONE
    alignment: AlignmentField = Field(default=Alignment.LEFT, alias="align")
    short_text: str | None = None
    color: str | None = None
    background: str | None = None
    border: str | None = None
    min_width: MinWidthField | None = None
    separator_block_width: U32 | None = None

    @property
    def is_urgent(self) -> bool:
        """Whether the host should highlight this block."""
        return self.urgent

    @property
    def has_separator(self) -> bool:
        """Whether a separator follows this block."""
        return self.separator

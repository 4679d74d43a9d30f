"""Records and codec for the i3bar status line protocol: header, blocks and click events."""

from i3bar_protocol.block import Block as Block
from i3bar_protocol.click_event import ClickEvent as ClickEvent
from i3bar_protocol.click_event import ClickEventBuilder as ClickEventBuilder
from i3bar_protocol.config import SignalConfig as SignalConfig
from i3bar_protocol.enums import Alignment as Alignment
from i3bar_protocol.enums import Markup as Markup
from i3bar_protocol.enums import MouseButton as MouseButton
from i3bar_protocol.errors import InvalidData as InvalidData
from i3bar_protocol.errors import JsonError as JsonError
from i3bar_protocol.errors import ParseError as ParseError
from i3bar_protocol.errors import ReadError as ReadError
from i3bar_protocol.header import Header as Header
from i3bar_protocol.header import HeaderBuilder as HeaderBuilder
from i3bar_protocol.legacy import LegacyClickEvent as LegacyClickEvent
from i3bar_protocol.min_width import Example as Example
from i3bar_protocol.min_width import MinWidth as MinWidth
from i3bar_protocol.min_width import Pixels as Pixels

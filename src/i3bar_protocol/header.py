"""Protocol header: the first line a producer writes.

Wire form: {"version":1,"stop_signal":10,"cont_signal":12,"click_events":true}

stop_signal and cont_signal may be omitted or 0, meaning "use the platform default". Decoding
replaces that sentinel with the SignalConfig in effect, so a Header never holds 0 there.
"""

from typing import IO, Any, ClassVar, Self

from pydantic import Field, ValidationInfo, field_validator

from i3bar_protocol.codec import I32, U8, WireRecord, loads, read
from i3bar_protocol.config import SignalConfig, default_signals

PROTOCOL_VERSION = 1
SENTINEL_SIGNAL = 0


def _context(config: SignalConfig | None) -> dict[str, Any]:
    return {"signals": config if config is not None else default_signals()}


class Header(WireRecord):
    """Version, pause/resume signals, and whether the producer wants click events."""

    FALLBACK_JSON: ClassVar[str] = '{"version":1}'

    version: U8
    stop_signal: I32 = Field(default=SENTINEL_SIGNAL, validate_default=True)
    continue_signal: I32 = Field(default=SENTINEL_SIGNAL, alias="cont_signal", validate_default=True)
    click_events: bool = False

    @field_validator("stop_signal", "continue_signal")
    @classmethod
    def substitute_sentinel(cls, value: int, info: ValidationInfo) -> int:
        """Replace the 0 sentinel with the default signal for this field."""
        if value != SENTINEL_SIGNAL:
            return value
        signals = (info.context or {}).get("signals") or default_signals()
        return signals.stop_signal if info.field_name == "stop_signal" else signals.continue_signal

    @classmethod
    def from_json(cls, data: str | bytes | bytearray, config: SignalConfig | None = None) -> Self:
        """Decode a header; 0 or missing signals become the config's (or platform's) defaults.

        Raises:
            ReadError: Input could not be read or ended early.
            JsonError: Input is not valid JSON.
            InvalidData: Missing version, or a field of the wrong type or range.

        """
        return cls._decode(loads(data), _context(config))

    @classmethod
    def from_value(cls, value: object, config: SignalConfig | None = None) -> Self:
        """Decode a header from an already-parsed JSON value."""
        return cls._decode(value, _context(config))

    @classmethod
    def read(cls, stream: IO[str] | IO[bytes], config: SignalConfig | None = None) -> Self:
        """Decode a header from a readable stream."""
        return cls._decode(read(stream), _context(config))

    @classmethod
    def default(cls, config: SignalConfig | None = None) -> "Header":
        """Version 1 header with default signals and click events off."""
        return HeaderBuilder(config).build()


class HeaderBuilder:
    """Mutable accumulator for a Header. build() always stamps version 1."""

    def __init__(self, config: SignalConfig | None = None) -> None:
        """Initialize with default signals and click events disabled.

        Args:
            config: Signal defaults; the platform's when omitted.

        """
        self._config = config if config is not None else default_signals()
        self._stop_signal = self._config.stop_signal
        self._continue_signal = self._config.continue_signal
        self._click_events = False

    def stop_signal(self, signal: int) -> Self:
        """Set the signal the host sends to pause the producer."""
        self._stop_signal = signal
        return self

    def continue_signal(self, signal: int) -> Self:
        """Set the signal the host sends to resume the producer."""
        self._continue_signal = signal
        return self

    def click_events(self, enabled: bool) -> Self:
        """Ask the host to send click events."""
        self._click_events = enabled
        return self

    def build(self) -> Header:
        """Freeze the accumulated values into a Header.

        Raises:
            InvalidData: A signal number is outside the i32 range.

        """
        return Header.from_value(
            {
                "version": PROTOCOL_VERSION,
                "stop_signal": self._stop_signal,
                "cont_signal": self._continue_signal,
                "click_events": self._click_events,
            },
            self._config,
        )

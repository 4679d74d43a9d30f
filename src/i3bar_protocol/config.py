"""Platform defaults for the header's pause/resume signals."""

import functools
import signal
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

# Linux numbering, used where the signal module lacks SIGSTOP/SIGCONT (e.g. Windows)
FALLBACK_STOP_SIGNAL = 19
FALLBACK_CONTINUE_SIGNAL = 18


class SignalConfig(BaseModel):
    """Signal numbers substituted for the header's 0 sentinel."""

    model_config = ConfigDict(frozen=True)

    stop_signal: int = Field(ge=1, description="Signal the host sends to pause the producer")
    continue_signal: int = Field(ge=1, description="Signal the host sends to resume the producer")

    @classmethod
    def build(cls, stop_signal: int | None = None, continue_signal: int | None = None) -> Self:
        """Build a SignalConfig from the host platform, with optional explicit overrides."""
        platform_stop = getattr(signal, "SIGSTOP", FALLBACK_STOP_SIGNAL)
        platform_continue = getattr(signal, "SIGCONT", FALLBACK_CONTINUE_SIGNAL)
        return cls(
            stop_signal=stop_signal if stop_signal is not None else int(platform_stop),
            continue_signal=continue_signal if continue_signal is not None else int(platform_continue),
        )


@functools.cache
def default_signals() -> SignalConfig:
    """Platform SignalConfig, resolved once per process."""
    return SignalConfig.build()

"""Delay and sound timers counting down at 60 Hz."""

from __future__ import annotations

from dataclasses import dataclass

TIMER_FREQUENCY = 60
"""Timer tick rate in Hz."""


@dataclass
class Timers:
    """The delay and sound timers."""

    delay: int = 0
    sound: int = 0

    def reset(self) -> None:
        """Set both timers to zero."""
        self.delay = 0
        self.sound = 0

    def is_sound_active(self) -> bool:
        """Whether the sound timer is running."""
        return self.sound > 0

    def tick(self) -> bool:
        """Count both timers down by one, stopping at zero; return whether sound is active."""
        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1
        return self.is_sound_active()
"""flick-schedule - Cancellable one-shot timers for flick games."""
from __future__ import annotations

from flick_schedule.components import Timer
from flick_schedule.timers import Timers, make_timer_system

__all__ = ["Timer", "Timers", "make_timer_system"]

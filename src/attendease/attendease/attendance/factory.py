from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time

from ..core.constants import DEFAULT_LATE_CUTOFF
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the check-in strategy from the late cutoff.

    Late only when the check-in is strictly after the cutoff on its own day.
    """

    late_cutoff: time = field(default=DEFAULT_LATE_CUTOFF)

    def for_checkin(self, *, check_in: datetime) -> AttendanceStrategy:
        cutoff = datetime.combine(check_in.date(), self.late_cutoff)
        if check_in > cutoff:
            return LateStrategy()
        return PresentStrategy()

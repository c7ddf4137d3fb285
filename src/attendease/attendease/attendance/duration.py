from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import combine
from ..core.constants import INVALID_TIMES


def calculate_total_hours(
    check_in_time: Optional[str],
    check_out_time: Optional[str],
    work_date: Optional[str],
) -> Optional[str]:
    """Worked duration as ``"{h}h {m}m"``.

    None when any input is missing; ``INVALID_TIMES`` when a value does not
    parse or check-out is not strictly after check-in.
    """

    if not check_in_time or not check_out_time or not work_date:
        return None

    start = combine(work_date, check_in_time)
    end = combine(work_date, check_out_time)
    if start is None or end is None or end <= start:
        return INVALID_TIMES

    # Whole minutes, dropping leftover seconds.
    minutes = int((end - start).total_seconds() // 60)
    return f"{minutes // 60}h {minutes % 60}m"

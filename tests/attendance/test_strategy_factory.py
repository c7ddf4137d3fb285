from datetime import datetime, time

from src.attendease.attendease.attendance.factory import AttendanceStrategyFactory
from src.attendease.attendease.attendance.strategies.late_strategy import LateStrategy
from src.attendease.attendease.attendance.strategies.present_strategy import PresentStrategy


def test_factory_checkin_before_noon_is_present():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(check_in=datetime(2025, 1, 1, 11, 59, 59))

    assert isinstance(strategy, PresentStrategy)


def test_factory_checkin_exactly_noon_is_present():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(check_in=datetime(2025, 1, 1, 12, 0, 0))

    assert isinstance(strategy, PresentStrategy)


def test_factory_checkin_after_noon_is_late():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(check_in=datetime(2025, 1, 1, 12, 0, 1))

    assert isinstance(strategy, LateStrategy)


def test_factory_respects_custom_cutoff():
    factory = AttendanceStrategyFactory(late_cutoff=time(9, 30))

    assert isinstance(factory.for_checkin(check_in=datetime(2025, 1, 1, 9, 31)), LateStrategy)
    assert isinstance(factory.for_checkin(check_in=datetime(2025, 1, 1, 9, 30)), PresentStrategy)

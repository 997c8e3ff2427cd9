from datetime import date
from typing import Callable

from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.shared.domain.exception import DateRangeError


class StayDatePolicy:
    """新規予約時の日付ルール

    - チェックイン日は今日以降
    - チェックアウト日はチェックイン日より後
    """

    def __init__(self, today_provider: Callable[[], date] = date.today) -> None:
        self._today_provider = today_provider

    def validate(self, check_in: date, check_out: date) -> None:
        if check_in < self._today_provider():
            raise DateRangeError("Check-in date cannot be in the past")
        StayPeriod(check_in=check_in, check_out=check_out)

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from hotel_reservation.shared.domain.exception import DateRangeError


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)

    チェックアウト日は常にチェックイン日より後（同日は不可）。
    """

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise DateRangeError("Check-out date must be after check-in date")

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.check_out - self.check_in).days

    def with_check_in(self, check_in: date) -> StayPeriod:
        return StayPeriod(check_in=check_in, check_out=self.check_out)

    def with_check_out(self, check_out: date) -> StayPeriod:
        return StayPeriod(check_in=self.check_in, check_out=check_out)

from datetime import date
from decimal import Decimal
from typing import ClassVar

from hotel_reservation.client.domain.entity import Client
from hotel_reservation.reservation.domain.enum import RoomType
from hotel_reservation.reservation.domain.value_object import (
    ReservationCode,
    StayPeriod,
)
from hotel_reservation.shared.domain import Entity, Money


class Reservation(Entity[ReservationCode]):
    """予約エンティティ

    - 顧客は参照のみ（ライフサイクルは顧客側が持つ）
    - 日付の変更時に合計金額を再計算する
    - 客室タイプとエキストラベッドは生成後に変更できない
    """

    NIGHTLY_RATES: ClassVar[dict[RoomType, Money]] = {
        RoomType.DOUBLE: Money.eur("50.0"),
        RoomType.SUITE: Money.eur("100.0"),
    }
    EXTRA_BED_SURCHARGE: ClassVar[Money] = Money.eur("20.0")
    LONG_STAY_NIGHTS: ClassVar[int] = 7
    LONG_STAY_DISCOUNT_RATE: ClassVar[Decimal] = Decimal("0.9")

    def __init__(
        self,
        id: ReservationCode,
        client: Client,
        stay_period: StayPeriod,
        room_type: RoomType,
        extra_bed: bool = False,
    ) -> None:
        super().__init__(id)
        self._client = client
        self._stay_period = stay_period
        self._room_type = room_type
        self._extra_bed = extra_bed
        self._total_cost = self.compute_total_cost()

    @property
    def code(self) -> ReservationCode:
        return self._id

    @property
    def client(self) -> Client:
        return self._client

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @stay_period.setter
    def stay_period(self, value: StayPeriod) -> None:
        self._stay_period = value
        self._total_cost = self.compute_total_cost()

    @property
    def check_in(self) -> date:
        return self._stay_period.check_in

    @check_in.setter
    def check_in(self, value: date) -> None:
        self.stay_period = self._stay_period.with_check_in(value)

    @property
    def check_out(self) -> date:
        return self._stay_period.check_out

    @check_out.setter
    def check_out(self, value: date) -> None:
        self.stay_period = self._stay_period.with_check_out(value)

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    @property
    def extra_bed(self) -> bool:
        return self._extra_bed

    @property
    def total_cost(self) -> Money:
        return self._total_cost

    def nightly_rate(self) -> Money:
        """1泊あたりの料金（エキストラベッド込み）"""
        rate = self.NIGHTLY_RATES[self._room_type]
        if self._extra_bed:
            rate = rate.add(self.EXTRA_BED_SURCHARGE)
        return rate

    def compute_total_cost(self) -> Money:
        """合計金額を計算する

        宿泊数 × 1泊料金。7泊を超える（8泊以上）場合は 10% 割引。丸めは行わない。
        """
        nights = self._stay_period.nights()
        total = self.nightly_rate().multiply(nights)
        if nights > self.LONG_STAY_NIGHTS:
            total = total.multiply(self.LONG_STAY_DISCOUNT_RATE)
        return total

    def describe(self) -> str:
        """表示用の文字列を返す"""
        return "\n".join(
            [
                f"Reservation Code: {self.code}",
                f"Client: {self._client.describe()}",
                f"Check-in Date: {self.check_in.isoformat()}",
                f"Check-out Date: {self.check_out.isoformat()}",
                f"Room Type: {self._room_type.value}",
                f"Extra Bed: {'Yes' if self._extra_bed else 'No'}",
                f"Total Cost: {self._total_cost}",
            ]
        )

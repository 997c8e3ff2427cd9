from datetime import date
from typing import TypedDict

from hotel_reservation.client.domain.entity import Client
from hotel_reservation.reservation.domain.entity.reservation import Reservation
from hotel_reservation.reservation.domain.enum import RoomType
from hotel_reservation.reservation.domain.value_object import (
    ReservationCode,
    StayPeriod,
)
from hotel_reservation.shared.domain import SequenceCounter


class ReservationDetails(TypedDict):
    """予約の入力データ"""

    check_in: date
    check_out: date
    room_type: RoomType
    extra_bed: bool


class ReservationFactory:
    """予約エンティティを生成するFactory"""

    def __init__(self, counter: SequenceCounter) -> None:
        self._counter = counter

    @property
    def counter(self) -> SequenceCounter:
        return self._counter

    def create(
        self, client: Client, reservation_details: ReservationDetails
    ) -> Reservation:
        """新規予約のエンティティを作成する

        日付・客室タイプの検証に失敗した場合はコードを消費しない。
        """
        stay_period = StayPeriod(
            check_in=reservation_details["check_in"],
            check_out=reservation_details["check_out"],
        )
        room_type = RoomType(reservation_details["room_type"])
        code = ReservationCode(self._counter.next())

        return Reservation(
            id=code,
            client=client,
            stay_period=stay_period,
            room_type=room_type,
            extra_bed=reservation_details["extra_bed"],
        )

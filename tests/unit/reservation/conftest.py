from datetime import date

import pytest

from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.enum import RoomType
from hotel_reservation.reservation.domain.value_object import (
    ReservationCode,
    StayPeriod,
)


@pytest.fixture
def create_reservation(create_client):
    """Reservation を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        code: int = 1,
        check_in: date = date(2024, 1, 1),
        check_out: date = date(2024, 1, 4),
        room_type: RoomType = RoomType.DOUBLE,
        extra_bed: bool = False,
    ) -> Reservation:
        return Reservation(
            id=ReservationCode(value=code),
            client=create_client(),
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            room_type=room_type,
            extra_bed=extra_bed,
        )

    return _factory

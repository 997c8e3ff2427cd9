from datetime import date

from hotel_reservation.client.domain.entity import Client
from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.factory import (
    ReservationDetails,
    ReservationFactory,
)
from hotel_reservation.reservation.domain.service import StayDatePolicy
from hotel_reservation.reservation.domain.value_object import StayPeriod
from hotel_reservation.shared.utils import get_logger

logger = get_logger(child=True)


class MakeReservationService:
    """予約作成・日程変更のユースケース"""

    def __init__(
        self,
        factory: ReservationFactory,
        stay_date_policy: StayDatePolicy | None = None,
    ) -> None:
        self._factory = factory
        self._stay_date_policy = stay_date_policy or StayDatePolicy()

    def reserve(
        self, client: Client, reservation_details: ReservationDetails
    ) -> Reservation:
        """予約を作成する"""
        self._stay_date_policy.validate(
            reservation_details["check_in"], reservation_details["check_out"]
        )
        reservation = self._factory.create(client, reservation_details)
        logger.info(
            "Reservation created",
            extra={
                "reservation_code": reservation.code.value,
                "client_code": client.code.value,
                "nights": reservation.stay_period.nights(),
                "total_cost": str(reservation.total_cost.amount),
            },
        )
        return reservation

    def reschedule(
        self,
        reservation: Reservation,
        check_in: date | None = None,
        check_out: date | None = None,
    ) -> Reservation:
        """日程を変更する

        両方の日付を変える場合は新しい期間全体を検証してから反映する。
        """
        if check_in is None:
            check_in = reservation.check_in
        if check_out is None:
            check_out = reservation.check_out
        reservation.stay_period = StayPeriod(check_in=check_in, check_out=check_out)
        logger.info(
            "Reservation rescheduled",
            extra={
                "reservation_code": reservation.code.value,
                "check_in": reservation.check_in.isoformat(),
                "check_out": reservation.check_out.isoformat(),
                "total_cost": str(reservation.total_cost.amount),
            },
        )
        return reservation

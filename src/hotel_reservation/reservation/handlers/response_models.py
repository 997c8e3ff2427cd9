from __future__ import annotations

from pydantic import BaseModel

from hotel_reservation.reservation.domain.entity import Reservation


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    reservation_code: int
    client_code: int
    client_name: str
    check_in_date: str
    check_out_date: str
    nights: int
    room_type: str
    extra_bed: bool
    total_cost_amount: str
    total_cost_currency: str
    description: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_type: str
    message: str


def to_response(reservation: Reservation) -> dict:
    """Reservation エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=ReservationData(
            reservation_code=reservation.code.value,
            client_code=reservation.client.code.value,
            client_name=reservation.client.name,
            check_in_date=reservation.check_in.isoformat(),
            check_out_date=reservation.check_out.isoformat(),
            nights=reservation.stay_period.nights(),
            room_type=reservation.room_type.value,
            extra_bed=reservation.extra_bed,
            total_cost_amount=str(reservation.total_cost.amount),
            total_cost_currency=str(reservation.total_cost.currency),
            description=reservation.describe(),
        )
    ).model_dump()


def to_error_response(error: Exception) -> dict:
    return ErrorResponse(
        error_type=type(error).__name__, message=str(error)
    ).model_dump()

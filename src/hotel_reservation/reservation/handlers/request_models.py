from datetime import date

from pydantic import BaseModel, Field

from hotel_reservation.reservation.domain.enum import RoomType


class ClientDetailsRequest(BaseModel):
    """顧客情報のリクエストモデル"""

    name: str = Field(..., min_length=1, max_length=100, description="氏名")
    identity_number: str = Field(
        ...,
        description="DNI（8桁の数字 + チェックサム文字）。形式はドメイン側で検証する",
        examples=["12345678Z"],
    )
    phone: str = Field(..., min_length=1, max_length=20, description="電話番号")


class ReservationDetailsRequest(BaseModel):
    """予約内容のリクエストモデル"""

    check_in_date: date = Field(
        ...,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2024-01-01"],
    )
    check_out_date: date = Field(
        ...,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2024-01-04"],
    )
    room_type: RoomType = Field(..., description="客室タイプ（DOUBLE / SUITE）")
    extra_bed: bool = Field(default=False, description="エキストラベッドの有無")


class MakeReservationRequest(BaseModel):
    """予約作成リクエストモデル"""

    client: ClientDetailsRequest
    reservation: ReservationDetailsRequest

from dataclasses import dataclass
from datetime import date, timedelta

import pytest

from hotel_reservation.client.applications.register_client import (
    RegisterClientService,
)
from hotel_reservation.client.domain.factory import ClientFactory
from hotel_reservation.reservation.applications.make_reservation import (
    MakeReservationService,
)
from hotel_reservation.reservation.domain.factory import ReservationFactory
from hotel_reservation.reservation.handlers import reserve
from hotel_reservation.shared.domain import SequenceCounter


@pytest.fixture
def lambda_context():
    @dataclass
    class LambdaContext:
        function_name: str = "hotel-reservation-reserve"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:eu-west-1:123456789012:function:hotel-reservation-reserve"
        )
        aws_request_id: str = "52fdfc07-2182-454f-963f-5f0f9a621d72"

    return LambdaContext()


@pytest.fixture(autouse=True)
def fresh_services(monkeypatch):
    """モジュール単位の連番をテストごとに初期化する"""
    monkeypatch.setattr(
        reserve,
        "client_service",
        RegisterClientService(factory=ClientFactory(counter=SequenceCounter())),
    )
    monkeypatch.setattr(
        reserve,
        "reservation_service",
        MakeReservationService(factory=ReservationFactory(counter=SequenceCounter())),
    )


def _event(identity_number="12345678Z", nights=10, room_type="SUITE", extra_bed=True):
    check_in = date.today() + timedelta(days=30)
    return {
        "client": {
            "name": "Ana García",
            "identity_number": identity_number,
            "phone": "600123456",
        },
        "reservation": {
            "check_in_date": check_in.isoformat(),
            "check_out_date": (check_in + timedelta(days=nights)).isoformat(),
            "room_type": room_type,
            "extra_bed": extra_bed,
        },
    }


class TestReserveHandler:
    def test_reserve_returns_reservation(self, lambda_context):
        response = reserve.lambda_handler(_event(), lambda_context)

        assert response["status"] == "success"
        data = response["data"]
        assert data["reservation_code"] == 1
        assert data["client_code"] == 1
        assert data["nights"] == 10
        assert data["room_type"] == "SUITE"
        assert data["extra_bed"] is True
        assert data["total_cost_amount"] == "1080.00"
        assert data["total_cost_currency"] == "EUR"
        assert data["description"].startswith("Reservation Code: 1\n")

    def test_codes_increment_across_invocations(self, lambda_context):
        reserve.lambda_handler(_event(), lambda_context)
        response = reserve.lambda_handler(_event(nights=3), lambda_context)

        assert response["data"]["reservation_code"] == 2
        assert response["data"]["client_code"] == 2

    def test_invalid_identity_number_returns_error(self, lambda_context):
        response = reserve.lambda_handler(
            _event(identity_number="12345678A"), lambda_context
        )

        assert response == {
            "status": "error",
            "error_type": "ValidationError",
            "message": "checksum mismatch",
        }

    def test_invalid_date_range_returns_error(self, lambda_context):
        response = reserve.lambda_handler(_event(nights=0), lambda_context)

        assert response["status"] == "error"
        assert response["error_type"] == "DateRangeError"

import pytest

from hotel_reservation.client.domain.entity import Client
from hotel_reservation.client.domain.factory import ClientFactory
from hotel_reservation.reservation.domain.factory import ReservationFactory
from hotel_reservation.shared.domain import SequenceCounter


@pytest.fixture
def client_factory():
    """テストごとに新しいカウンタを持つ ClientFactory"""
    return ClientFactory(counter=SequenceCounter())


@pytest.fixture
def reservation_factory():
    """テストごとに新しいカウンタを持つ ReservationFactory"""
    return ReservationFactory(counter=SequenceCounter())


@pytest.fixture
def create_client(client_factory):
    """Client を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        name: str = "Ana García",
        identity_number: str = "12345678Z",
        phone: str = "600123456",
    ) -> Client:
        return client_factory.create(
            {"name": name, "identity_number": identity_number, "phone": phone}
        )

    return _factory

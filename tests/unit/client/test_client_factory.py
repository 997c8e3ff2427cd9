import pytest

from hotel_reservation.client.domain.entity import Client
from hotel_reservation.client.domain.factory import ClientDetails, ClientFactory
from hotel_reservation.shared.domain import SequenceCounter, ValidationError


class TestClientFactory:
    def test_create_client(self, client_factory):
        client_details: ClientDetails = {
            "name": "Ana García",
            "identity_number": "12345678Z",
            "phone": "600123456",
        }

        client = client_factory.create(client_details)

        assert isinstance(client, Client)
        assert client.code.value == 1
        assert str(client.identity_number) == "12345678Z"

    def test_codes_are_sequential(self, create_client):
        codes = [create_client().code.value for _ in range(5)]
        assert codes == [1, 2, 3, 4, 5]

    def test_rejected_client_does_not_consume_code(self, create_client):
        first = create_client()
        with pytest.raises(ValidationError):
            create_client(identity_number="12345678A")
        with pytest.raises(ValidationError):
            create_client(identity_number=None)
        second = create_client()

        assert first.code.value == 1
        assert second.code.value == 2

    def test_shared_counter(self):
        counter = SequenceCounter()
        details: ClientDetails = {
            "name": "Ana García",
            "identity_number": "12345678Z",
            "phone": "600123456",
        }

        ClientFactory(counter=counter).create(details)
        client = ClientFactory(counter=counter).create(details)

        assert client.code.value == 2
        assert counter.last == 2

    def test_counter_is_required(self):
        with pytest.raises(TypeError):
            ClientFactory()

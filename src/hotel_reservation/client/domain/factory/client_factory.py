from typing import TypedDict

from hotel_reservation.client.domain.entity.client import Client
from hotel_reservation.client.domain.value_object import ClientCode, IdentityNumber
from hotel_reservation.shared.domain import SequenceCounter


class ClientDetails(TypedDict):
    """顧客の入力データ"""

    name: str
    identity_number: str
    phone: str


class ClientFactory:
    """顧客エンティティを生成するFactory"""

    def __init__(self, counter: SequenceCounter) -> None:
        self._counter = counter

    @property
    def counter(self) -> SequenceCounter:
        return self._counter

    def create(self, client_details: ClientDetails) -> Client:
        """新規顧客のエンティティを作成する

        検証に失敗した場合はコードを消費しない。
        """
        identity_number = IdentityNumber(client_details["identity_number"])
        code = ClientCode(self._counter.next())

        return Client(
            id=code,
            name=client_details["name"],
            identity_number=identity_number,
            phone=client_details["phone"],
        )

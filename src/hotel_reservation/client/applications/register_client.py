from hotel_reservation.client.domain.entity import Client
from hotel_reservation.client.domain.factory import ClientDetails, ClientFactory
from hotel_reservation.shared.utils import get_logger

logger = get_logger(child=True)


class RegisterClientService:
    """顧客登録のユースケース"""

    def __init__(self, factory: ClientFactory) -> None:
        self._factory = factory

    def register(self, client_details: ClientDetails) -> Client:
        """顧客を登録する"""
        client = self._factory.create(client_details)
        logger.info("Client registered", extra={"client_code": client.code.value})
        return client

    def change_identity_number(self, client: Client, identity_number: str) -> Client:
        """DNI を変更する（不正な場合は元の値のまま ValidationError）"""
        client.identity_number = identity_number
        logger.info(
            "Client identity number changed",
            extra={"client_code": client.code.value},
        )
        return client

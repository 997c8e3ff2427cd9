from hotel_reservation.client.domain.value_object import ClientCode, IdentityNumber
from hotel_reservation.shared.domain import Entity


class Client(Entity[ClientCode]):
    """顧客エンティティ

    DNI は常に検証済み。更新時も検証に失敗すれば元の値を保持する。
    """

    def __init__(
        self,
        id: ClientCode,
        name: str,
        identity_number: IdentityNumber,
        phone: str,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._identity_number = identity_number
        self._phone = phone

    @property
    def code(self) -> ClientCode:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def identity_number(self) -> IdentityNumber:
        return self._identity_number

    @identity_number.setter
    def identity_number(self, value: str | IdentityNumber) -> None:
        # IdentityNumber の生成に失敗した場合は代入しない
        if not isinstance(value, IdentityNumber):
            value = IdentityNumber(value)
        self._identity_number = value

    @property
    def phone(self) -> str:
        return self._phone

    @phone.setter
    def phone(self, value: str) -> None:
        self._phone = value

    def describe(self) -> str:
        """表示用の文字列を返す"""
        return (
            f"Code: {self.code}, Name: {self._name}, "
            f"ID: {self._identity_number}, Phone: {self._phone}"
        )

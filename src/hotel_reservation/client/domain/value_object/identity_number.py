from dataclasses import dataclass

from hotel_reservation.client.domain.service.identity_validator import (
    IdentityValidator,
)


@dataclass(frozen=True)
class IdentityNumber:
    """DNI（検証済み）"""

    value: str

    def __post_init__(self) -> None:
        IdentityValidator.validate(self.value)

    def __str__(self) -> str:
        return self.value

    @property
    def digits(self) -> str:
        """数字部分（冒頭8桁）"""
        return self.value[:8]

    @property
    def letter(self) -> str:
        """チェックサム文字"""
        return self.value[8]

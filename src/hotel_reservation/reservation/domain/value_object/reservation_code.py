from dataclasses import dataclass


@dataclass(frozen=True)
class ReservationCode:
    """予約コード（1 からの連番）"""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("ReservationCode must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)

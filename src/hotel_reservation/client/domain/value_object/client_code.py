from dataclasses import dataclass


@dataclass(frozen=True)
class ClientCode:
    """顧客コード（1 からの連番）"""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("ClientCode must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)

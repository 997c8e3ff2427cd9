import re
from typing import ClassVar

from hotel_reservation.shared.domain.exception import ValidationError


class IdentityValidator:
    """DNI（8桁の数字 + チェックサム文字）のバリデータ

    例: 12345678Z（12345678 % 23 = 14 → "Z"）

    - 状態を持たない純粋関数として扱う
    - 長さ不正は "bad length"、形式不正は "bad format"、
      文字の不一致は "checksum mismatch" で失敗する
    """

    LENGTH: ClassVar[int] = 9
    CHECKSUM_ALPHABET: ClassVar[str] = "TRWAGMYFPDXBNJZSQVHLCKE"
    DIGITS_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{8}")

    @classmethod
    def validate(cls, value: str | None) -> None:
        """不正な場合は ValidationError を送出する"""
        if value is None or len(value) != cls.LENGTH:
            raise ValidationError("bad length")

        digits, letter = value[:8], value[8]
        if not cls.DIGITS_PATTERN.fullmatch(digits):
            raise ValidationError("bad format")
        if not ("A" <= letter <= "Z"):
            raise ValidationError("bad format")

        if letter != cls.expected_letter(digits):
            raise ValidationError("checksum mismatch")

    @classmethod
    def is_valid(cls, value: str | None) -> bool:
        try:
            cls.validate(value)
        except ValidationError:
            return False
        return True

    @classmethod
    def expected_letter(cls, digits: str) -> str:
        """8桁の数字に対応するチェックサム文字を返す"""
        if not cls.DIGITS_PATTERN.fullmatch(digits):
            raise ValidationError("bad format")
        return cls.CHECKSUM_ALPHABET[int(digits) % len(cls.CHECKSUM_ALPHABET)]

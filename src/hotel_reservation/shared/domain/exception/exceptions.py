class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class ValidationError(DomainException):
    """入力値の形式・チェックサムが不正な場合（DNI など）"""

    pass


class DateRangeError(BusinessRuleViolationException):
    """チェックアウト日がチェックイン日より後でない場合"""

    pass

from .exceptions import (
    BusinessRuleViolationException,
    DateRangeError,
    DomainException,
    ValidationError,
)

__all__ = [
    "DomainException",
    "BusinessRuleViolationException",
    "ValidationError",
    "DateRangeError",
]

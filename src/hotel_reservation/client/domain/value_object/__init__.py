from .client_code import ClientCode
from .identity_number import IdentityNumber

__all__ = ["ClientCode", "IdentityNumber"]

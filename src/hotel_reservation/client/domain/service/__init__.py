from .identity_validator import IdentityValidator as IdentityValidator

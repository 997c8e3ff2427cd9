from .entity import Client as Client
from .factory import ClientDetails as ClientDetails
from .factory import ClientFactory as ClientFactory
from .service import IdentityValidator as IdentityValidator
from .value_object import ClientCode as ClientCode
from .value_object import IdentityNumber as IdentityNumber

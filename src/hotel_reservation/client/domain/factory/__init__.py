from .client_factory import ClientDetails as ClientDetails
from .client_factory import ClientFactory as ClientFactory

from .logger import SERVICE_NAME as SERVICE_NAME
from .logger import get_logger as get_logger

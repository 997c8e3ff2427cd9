from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DateRangeError as DateRangeError,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    ValidationError as ValidationError,
)
from .sequence import SequenceCounter as SequenceCounter
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    Money as Money,
)

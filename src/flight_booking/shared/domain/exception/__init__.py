from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import CapacityError as CapacityError
from .exceptions import DomainException as DomainException
from .exceptions import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exceptions import NotFoundError as NotFoundError

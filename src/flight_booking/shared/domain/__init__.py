from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import CapacityError as CapacityError
from .exception import DomainException as DomainException
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import NotFoundError as NotFoundError
from .repository import Repository as Repository
from .value_object import AirportCode as AirportCode
from .value_object import IsoDateTime as IsoDateTime

"""Core domain of resource-zones: value objects, entities, protocols, exceptions."""

from .exceptions import *
from .value_objects import *
from .entities import *
from .protocols import *

from . import exceptions, value_objects, entities, protocols

__all__ = (
    exceptions.__all__
    + value_objects.__all__
    + entities.__all__
    + protocols.__all__
)

"""Enum value and enum set model."""

from .enum_set import EnumSet
from .facades import CacheFacade, PerformanceFacade, SecurityFacade
from .proxy import EnumProxy
from .value import EnumValue
from .watchers import Observable

__all__ = [
    "CacheFacade",
    "EnumProxy",
    "EnumSet",
    "EnumValue",
    "Observable",
    "PerformanceFacade",
    "SecurityFacade",
]

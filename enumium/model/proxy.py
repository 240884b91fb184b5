"""Read-only view exposing member payloads by name."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

from enumium.core.types import Payload

if TYPE_CHECKING:
    from .enum_set import EnumSet


class EnumProxy:
    """Payload accessor and membership predicate for one enum set.

    The proxy is a live view: members added to or removed from the set are
    visible immediately. It exposes no way to mutate the set.
    """

    __slots__ = ("_enum_set",)

    def __init__(self, enum_set: "EnumSet") -> None:
        self._enum_set = enum_set

    @property
    def enum_set(self) -> "EnumSet":
        return self._enum_set

    def get(self, name: str, default: Any = None) -> Payload:
        member = self._enum_set.get_value(name)
        return default if member is None else member.value

    def matches(self, payload: Payload) -> bool:
        return self._enum_set.validate(payload)

    def __getitem__(self, name: str) -> Payload:
        member = self._enum_set.get_value(name)
        if member is None:
            raise KeyError(name)
        return member.value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._enum_set.has_value(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._enum_set.get_all_names())

    def __len__(self) -> int:
        return len(self._enum_set)

    def __repr__(self) -> str:
        return f"EnumProxy({self._enum_set.name!r})"


__all__ = ["EnumProxy"]

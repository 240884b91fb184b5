"""Single named constant belonging to an enum set."""
from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Dict, Mapping

from enumium.core.enums import EnumEvent
from enumium.core.errors import FrozenStateError
from enumium.core.identity import generate_id
from enumium.core.types import InstanceId, Payload

from .watchers import Observable

if TYPE_CHECKING:
    from .enum_set import EnumSet


class EnumValue(Observable):
    """Named payload with metadata and watchers.

    Equality is structural on ``(name, value, enum_type_name)``. ``parent`` is a
    non-owning back-reference to the set that created the value, and
    ``enum_type_name`` is that set's name at creation time.

    Names are not validated here: :meth:`EnumSet.add_value` enforces the naming
    rules, while deserialization deliberately accepts whatever it is given.
    """

    def __init__(
        self,
        name: str,
        value: Payload,
        enum_type_name: str,
        metadata: Mapping[str, Any] | None = None,
        parent: "EnumSet | None" = None,
    ) -> None:
        self.name = name
        self.value = value
        self.enum_type_name = enum_type_name
        self.metadata: Dict[str, Any] = dict(metadata) if metadata is not None else {}
        self.parent = parent
        self._id: InstanceId = generate_id()
        self._frozen = False
        self._init_watchers()

    @property
    def id(self) -> InstanceId:
        return self._id

    def _observable_label(self) -> str:
        return f"{self.enum_type_name}.{self.name}"

    def is_valid(self) -> bool:
        return self.name is not None and self.value is not None and self.enum_type_name is not None

    def describe(self) -> str:
        return f"{self.enum_type_name}.{self.name} = {self.value}"

    # Metadata ----------------------------------------------------------
    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    def set_metadata(self, key: str, value: Any) -> None:
        if self._frozen:
            raise FrozenStateError(f"Cannot modify frozen enum value {self._observable_label()}")
        self.metadata[key] = value
        self.trigger(EnumEvent.METADATA_CHANGED, {"key": key, "value": value})

    # Freezing ----------------------------------------------------------
    def freeze(self) -> None:
        self._frozen = True

    def unfreeze(self) -> None:
        self._frozen = False

    def is_frozen(self) -> bool:
        return self._frozen

    # Copying / comparison ----------------------------------------------
    def clone(self) -> "EnumValue":
        """Return a detached copy; watchers are not carried over."""

        cloned = EnumValue(
            self.name,
            copy.deepcopy(self.value),
            self.enum_type_name,
            copy.deepcopy(self.metadata),
            self.parent,
        )
        cloned._frozen = self._frozen
        return cloned

    def equals(self, other: Any) -> bool:
        if not isinstance(other, EnumValue):
            return False
        return (
            self.name == other.name
            and self.value == other.value
            and self.enum_type_name == other.enum_type_name
        )

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.name, self.enum_type_name))

    # Wire format -------------------------------------------------------
    def serialize(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": copy.deepcopy(self.value),
            "enumTypeName": self.enum_type_name,
            "metadata": copy.deepcopy(self.metadata),
            "id": self._id,
        }

    @classmethod
    def deserialize(cls, data: Mapping[str, Any], parent: "EnumSet | None" = None) -> "EnumValue":
        """Rebuild a value from :meth:`serialize` output, restoring its identifier.

        Frozen state is not part of the wire shape, so the result is always thawed.
        """

        instance = cls(
            data.get("name"),
            copy.deepcopy(data.get("value")),
            data.get("enumTypeName", data.get("enumType")),
            copy.deepcopy(data.get("metadata") or {}),
            parent,
        )
        if data.get("id") is not None:
            instance._id = InstanceId(str(data["id"]))
        return instance

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"EnumValue(name={self.name!r}, value={self.value!r}, enum_type_name={self.enum_type_name!r})"


__all__ = ["EnumValue"]

from __future__ import annotations

from enumium.model.enum_set import EnumSet
from enumium.runtime.registry import EnumRegistry


def test_serialize_should_emit_wire_shape(color_enum: EnumSet) -> None:
    color_enum.set_metadata("owner", "ui")
    data = color_enum.serialize()

    assert data["name"] == "Color"
    assert data["version"] == "1.0.0"
    assert data["metadata"] == {"owner": "ui"}
    assert data["id"] == color_enum.id
    assert [entry["name"] for entry in data["values"]] == ["Red", "Green", "Blue"]
    assert data["values"][0]["enumTypeName"] == "Color"


def test_deserialize_should_restore_order_metadata_and_version(color_enum: EnumSet) -> None:
    color_enum.get_value("Green").set_metadata("hex", "#00ff00")
    color_enum.set_version("3.1.0")
    color_enum.freeze()

    target = EnumRegistry()
    restored = EnumSet.deserialize(color_enum.serialize(), registry=target)

    assert target.get_enum_set("Color") is restored
    assert restored.name == "Color"
    assert restored.get_version() == "3.1.0"
    assert restored.id == color_enum.id
    assert restored.is_frozen() is False
    assert [(m.name, m.value, m.metadata) for m in restored] == [
        (m.name, m.value, m.metadata) for m in color_enum
    ]
    assert restored.equals(color_enum)


def test_deserialize_should_bypass_add_value(registry: EnumRegistry, recorder) -> None:
    data = {
        "name": "Loose",
        "version": "1.0.0",
        "metadata": {},
        "values": [
            {"name": "not valid", "value": 1, "enumTypeName": "Loose", "metadata": {}, "id": "a"},
            {"name": "Twin", "value": 2, "enumTypeName": "Loose", "metadata": {}, "id": "b"},
        ],
        "id": "set-1",
    }
    restored = EnumSet.deserialize(data, registry=registry)

    assert restored.has_value("not valid")
    assert restored.get_value("Twin").id == "b"
    assert restored.performance().get_stats()["creations"] == 0


def test_deserialize_should_default_missing_version(bare_settings) -> None:
    registry = EnumRegistry(bare_settings)
    restored = EnumSet.deserialize({"name": "Empty", "values": []}, registry=registry)
    assert restored.get_version() == "0.1.0"
    assert len(restored) == 0


def test_serialize_should_return_detached_metadata(color_enum: EnumSet) -> None:
    color_enum.set_metadata("tags", ["a"])
    data = color_enum.serialize()
    data["metadata"]["tags"].append("b")
    assert color_enum.get_metadata("tags") == ["a"]

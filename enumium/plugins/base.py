"""Plugin contract and adapters.

A plugin is anything with a single ``execute(enum_set, *args, **kwargs)``
operation. Enum sets accept three shapes at registration time (a
:class:`Plugin`, a mapping or object exposing a callable ``execute``, or a bare
callable) and normalize them through :func:`resolve_plugin` when executed.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping

from enumium.core.errors import InvalidPluginError

if TYPE_CHECKING:
    from enumium.model.enum_set import EnumSet


class Plugin:
    """Abstract interface for enum set extensions."""

    name: str = ""

    def execute(self, enum_set: "EnumSet", *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionPlugin(Plugin):
    """Wrap a bare ``func(enum_set, *args)`` into the :class:`Plugin` interface."""

    def __init__(self, func: Callable[..., Any], name: str | None = None) -> None:
        self.func = func
        self.name = name or getattr(func, "__name__", "")

    def execute(self, enum_set: "EnumSet", *args: Any, **kwargs: Any) -> Any:
        return self.func(enum_set, *args, **kwargs)


def has_plugin_shape(candidate: Any) -> bool:
    """Registration-time check: mapping, callable, or object with ``execute``."""

    if candidate is None:
        return False
    return isinstance(candidate, Mapping) or callable(candidate) or hasattr(candidate, "execute")


def resolve_plugin(candidate: Any, name: str | None = None) -> Plugin:
    """Return ``candidate`` as a :class:`Plugin` or raise :class:`InvalidPluginError`.

    An ``execute`` capability wins over direct callability.
    """

    if isinstance(candidate, Plugin):
        return candidate
    if isinstance(candidate, Mapping):
        execute = candidate.get("execute")
    else:
        execute = getattr(candidate, "execute", None)
    if callable(execute):
        return FunctionPlugin(execute, name=name)
    if callable(candidate):
        return FunctionPlugin(candidate, name=name)
    raise InvalidPluginError(f"Plugin {name or candidate!r} has no valid execute method")


__all__ = ["FunctionPlugin", "Plugin", "has_plugin_shape", "resolve_plugin"]

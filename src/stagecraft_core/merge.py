"""Deep default-merging over dynamically shaped option trees.

Records are any ``Mapping`` (plain dicts as well as the read-only proxies of
the default tree). Sequences and scalars are atomic: a list present in the
partial replaces the base list outright.

``None`` in a partial counts as "not set", so defaults may carry ``None``
placeholders (``build.ssr``, ``render.ssr``) that a later layer fills in.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def is_record(value: Any) -> bool:
    return isinstance(value, Mapping)


def copy_value(value: Any) -> Any:
    """Return ``value`` with every nested record/sequence container rebuilt.

    Frozen containers come back mutable (proxies become dicts, tuples become
    lists). Leaves such as callables are shared, not copied.
    """
    if isinstance(value, Mapping):
        return {key: copy_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [copy_value(item) for item in value]
    return value


def freeze(value: Any) -> Any:
    """Build a read-only snapshot of an option tree."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def defaults_deep(partial: Mapping[str, Any], base: Mapping[str, Any]) -> dict[str, Any]:
    """Fill keys missing from ``partial`` with values from ``base``.

    Keys defined by ``partial`` keep the partial's value at every depth; keys
    only ``base`` defines are copied in. Neither argument is mutated and the
    result shares no containers with either of them.
    """
    result: dict[str, Any] = {}
    for key, value in partial.items():
        fallback = base.get(key)
        if value is None:
            if fallback is not None:
                result[key] = copy_value(fallback)
            else:
                result[key] = None
        elif is_record(value) and is_record(fallback):
            result[key] = defaults_deep(value, fallback)
        else:
            result[key] = copy_value(value)

    for key, fallback in base.items():
        if key not in result:
            result[key] = copy_value(fallback)
    return result


def deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Layer ``overlay`` on top of ``base`` (later wins)."""
    return defaults_deep(overlay, base)

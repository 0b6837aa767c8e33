"""Pseudo-attribute extraction.

A pseudo-attribute is a ``:``-prefixed key in a raw attribute map that
configures how a composite element is assembled instead of becoming an HTML
attribute. ``:scope:name`` keys forward ``name`` to the inner element that a
composite knows as ``scope``.

Extraction must finish before the remaining entries are merged as literal
attributes. Keys nobody consumes are not special: they are rendered as
attribute names like any other key.
"""

from __future__ import annotations

import re
from typing import Any, MutableMapping, Mapping

from .errors import MissingPseudoAttribute

PSEUDO_ATTRIBUTE_PATTERN = re.compile(r"^:[A-Za-z][A-Za-z0-9-]*$")


def is_pseudo_attribute_key(key: Any) -> bool:
    return isinstance(key, str) and PSEUDO_ATTRIBUTE_PATTERN.match(key) is not None


def consume_pseudo_attribute(
    attributes: MutableMapping[str, Any] | None,
    key: str,
    default: Any = None,
) -> Any:
    """Pop ``key`` from ``attributes`` and return its value.

    Returns ``default`` unchanged when the map is empty or missing, the key is
    malformed, or the key is absent. Malformed keys are not an error.
    """
    if not attributes or not is_pseudo_attribute_key(key) or key not in attributes:
        return default
    return attributes.pop(key)


def consume_scoped_pseudo_attributes(
    attributes: MutableMapping[str, Any] | None,
    scope: str,
) -> dict[str, Any]:
    """Pop every ``:{scope}:{name}`` entry and return ``{name: value}``."""
    if not attributes:
        return {}
    prefix = f":{scope}:"
    scoped: dict[str, Any] = {}
    for key in list(attributes):
        if not isinstance(key, str) or not key.startswith(prefix):
            continue
        name = key[len(prefix):]
        if not name:
            continue
        scoped[name] = attributes.pop(key)
    return scoped


def split_pseudo_attribute(
    attributes: Mapping[str, Any] | None,
    key: str,
    default: Any = None,
) -> tuple[Any, dict[str, Any]]:
    """Non-mutating form of `consume_pseudo_attribute`: returns (value, remaining)."""
    remaining = dict(attributes or {})
    value = consume_pseudo_attribute(remaining, key, default)
    return value, remaining


def split_scoped_pseudo_attributes(
    attributes: Mapping[str, Any] | None,
    scope: str,
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Non-mutating form of `consume_scoped_pseudo_attributes`: returns (scoped, remaining)."""
    remaining = dict(attributes or {})
    scoped = consume_scoped_pseudo_attributes(remaining, scope)
    return scoped, remaining


class PseudoAttributes:
    """Mutable extraction builder over a private copy of a raw attribute map.

    Composite elements consume their configuration through this object and pass
    `remaining()` on as literal attributes. The caller's map is never touched.
    """

    def __init__(self, attributes: Mapping[str, Any] | None = None, *, component: str | None = None) -> None:
        self._attributes: dict[str, Any] = dict(attributes or {})
        self.component = component

    def __contains__(self, key: str) -> bool:
        return key in self._attributes

    def __len__(self) -> int:
        return len(self._attributes)

    def consume(self, key: str, default: Any = None) -> Any:
        return consume_pseudo_attribute(self._attributes, key, default)

    def consume_scoped(self, scope: str) -> dict[str, Any]:
        return consume_scoped_pseudo_attributes(self._attributes, scope)

    def require(self, key: str) -> str:
        value = self.consume(key)
        if not isinstance(value, str) or not value:
            raise MissingPseudoAttribute(key, self.component)
        return value

    def unconsumed(self) -> list[str]:
        return [key for key in self._attributes if isinstance(key, str) and key.startswith(":")]

    def remaining(self) -> dict[str, Any]:
        return dict(self._attributes)

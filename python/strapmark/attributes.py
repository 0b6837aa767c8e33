from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .classes import ClassGroup, resolve_classes

CLASS_KEY = "class"


def is_resolvable_class(value: Any) -> bool:
    """True for values that take part in class-string merging."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def merge_attributes(
    user_attributes: Mapping[str, Any] | None,
    default_attributes: Mapping[str, Any] | None,
    groups: Iterable[ClassGroup] = (),
) -> dict[str, Any]:
    """Merge caller attributes over defaults.

    Default keys keep their position and take the caller's value when both
    sides define them; caller-only keys follow in the caller's order. The
    ``class`` entry is resolved with `resolve_classes` unless the caller sets it
    to a bool, in which case the default class is dropped and the bool wins.

    Neither argument is mutated. Non-scalar values pass through untouched;
    rendering validates them.
    """
    defaults = dict(default_attributes or {})
    user = dict(user_attributes) if user_attributes is not None else None

    has_user_class = user is not None and CLASS_KEY in user
    has_default_class = CLASS_KEY in defaults

    if has_user_class or has_default_class:
        user_class = user[CLASS_KEY] if has_user_class else None
        default_class = defaults.get(CLASS_KEY)
        if isinstance(user_class, bool):
            defaults.pop(CLASS_KEY, None)
        else:
            user_ok = is_resolvable_class(user_class)
            default_ok = is_resolvable_class(default_class)
            if user_ok or default_ok:
                resolved = resolve_classes(
                    str(default_class) if default_ok else "",
                    str(user_class) if user_ok else "",
                    groups,
                )
                if user is not None:
                    user[CLASS_KEY] = resolved
                else:
                    defaults[CLASS_KEY] = resolved

    if user is None:
        return defaults
    merged = defaults
    merged.update(user)
    return merged

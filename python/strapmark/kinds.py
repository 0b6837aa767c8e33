from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .attributes import merge_attributes
from .classes import ClassGroup
from .core import AttributeMap, ElementNode
from .errors import UnconsumedPseudoAttributeWarning

# Process-wide default for ElementKind.build; see Config.apply().
WARN_UNCONSUMED = True


def set_warn_unconsumed(enabled: bool) -> None:
    global WARN_UNCONSUMED
    WARN_UNCONSUMED = bool(enabled)


@dataclass(frozen=True)
class ElementKind:
    """Capability record describing one kind of element.

    Concrete elements are plain `ElementKind` values, specialised with
    `derive()` rather than subclassing.
    """

    tag_name: str
    default_attributes: AttributeMap = field(default_factory=dict)
    groups: tuple[ClassGroup, ...] = ()
    self_closing: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_attributes", MappingProxyType(dict(self.default_attributes)))
        object.__setattr__(self, "groups", tuple(self.groups))

    def build(
        self,
        user_attributes: Mapping[str, Any] | None = None,
        content: Any = None,
        *,
        warn_unconsumed: bool | None = None,
    ) -> ElementNode:
        attributes = merge_attributes(user_attributes, self.default_attributes, self.groups)
        if warn_unconsumed is None:
            warn_unconsumed = WARN_UNCONSUMED
        if warn_unconsumed:
            leftover = [key for key in attributes if isinstance(key, str) and key.startswith(":")]
            if leftover:
                warnings.warn(
                    f"<{self.tag_name}> received pseudo-attributes nothing consumed: {', '.join(leftover)}",
                    UnconsumedPseudoAttributeWarning,
                    stacklevel=2,
                )
        return ElementNode(
            tag=self.tag_name,
            attributes=attributes,
            content=content,
            self_closing=self.self_closing,
        )

    def __call__(self, user_attributes: Mapping[str, Any] | None = None, content: Any = None) -> ElementNode:
        return self.build(user_attributes, content)

    def derive(
        self,
        *,
        tag_name: str | None = None,
        default_attributes: Mapping[str, Any] | None = None,
        groups: Iterable[ClassGroup] | None = None,
        extra_groups: Iterable[ClassGroup] = (),
        self_closing: bool | None = None,
    ) -> "ElementKind":
        """Return a specialised kind.

        New defaults are merged over this kind's defaults using this kind's
        groups, so a derived ``class`` replaces conflicting parent classes.
        ``groups`` replaces the parent groups; ``extra_groups`` appends to them.
        """
        defaults = dict(self.default_attributes)
        if default_attributes is not None:
            defaults = merge_attributes(default_attributes, defaults, self.groups)
        new_groups = tuple(groups) if groups is not None else self.groups
        return ElementKind(
            tag_name=tag_name if tag_name is not None else self.tag_name,
            default_attributes=defaults,
            groups=new_groups + tuple(extra_groups),
            self_closing=self_closing if self_closing is not None else self.self_closing,
        )


def generic(
    tag: str,
    attributes: Mapping[str, Any] | None = None,
    content: Any = None,
    self_closing: bool = False,
) -> ElementNode:
    """Build a node for an ad-hoc tag with no defaults."""
    return ElementKind(tag, self_closing=self_closing).build(attributes, content)

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from html import escape
from types import MappingProxyType
from typing import Any, Callable, Mapping, Union

from .errors import (
    InvalidAttributeName,
    InvalidAttributeValue,
    InvalidContentItem,
    InvalidTagName,
    SelfClosingWithContent,
)

# Compiled once at import and never rebound.
TAG_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")
ATTRIBUTE_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9:\-._]*$")

AttributeValue = Union[bool, int, float, str]
AttributeMap = Mapping[str, AttributeValue]
ContentItem = Union[str, "ElementNode"]
Content = Union[None, str, "ElementNode", tuple[ContentItem, ...]]


@dataclass(frozen=True)
class RenderOptions:
    strict_attribute_names: bool = True


DEFAULT_RENDER_OPTIONS = RenderOptions()


def _normalize_content(content: Any) -> Content:
    if content is None or isinstance(content, (str, ElementNode)):
        return content
    if isinstance(content, (list, tuple)):
        for item in content:
            if not isinstance(item, (str, ElementNode)):
                raise InvalidContentItem(item)
        return tuple(content)
    raise InvalidContentItem(content)


def _content_is_empty(content: Content) -> bool:
    return content is None or content == "" or content == ()


@dataclass(frozen=True)
class ElementNode:
    """One resolved markup element.

    Attributes are frozen into a read-only mapping and list content into a
    tuple, so a node can be shared freely once built. Tag and attribute names
    are checked when the node is rendered.
    """

    tag: str
    attributes: AttributeMap = field(default_factory=dict)
    content: Content = None
    self_closing: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes or {})))
        content = _normalize_content(self.content)
        object.__setattr__(self, "content", content)
        if self.self_closing and not _content_is_empty(content):
            raise SelfClosingWithContent(self.tag)

    def __hash__(self) -> int:
        # mappingproxy is unhashable; hash its items instead.
        return hash((self.tag, tuple(self.attributes.items()), self.content, self.self_closing))

    def to_html(self, *, options: RenderOptions | None = None) -> str:
        return render_node(self, options=options)

    def __str__(self) -> str:
        return render_node(self)


def component(fn: Callable) -> Callable:
    """Marker decorator for function components."""
    fn.__strapmark_component__ = True
    return fn


def _normalize_attr_name(name: str) -> str:
    if name == "class_name":
        return "class"
    return name.replace("_", "-")


def el(tag: str, *children: Any, self_closing: bool = False, **attributes: Any) -> ElementNode:
    """Build a node from positional children and keyword attributes.

    ``None`` children are dropped and list/tuple children are flattened one
    level. ``class_name`` maps to ``class`` and underscores map to hyphens.
    """
    flat: list[Any] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            flat.extend(x for x in child if x is not None)
        else:
            flat.append(child)
    attrs = {_normalize_attr_name(key): value for key, value in attributes.items()}
    if not flat:
        content: Any = None
    elif len(flat) == 1:
        content = flat[0]
    else:
        content = flat
    return ElementNode(tag=tag, attributes=attrs, content=content, self_closing=self_closing)


def format_number(value: int | float) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _check_attr_name(name: Any, strict: bool) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidAttributeName(name)
    if strict and not ATTRIBUTE_NAME_PATTERN.match(name):
        raise InvalidAttributeName(name)
    return name


def render_attributes(attributes: AttributeMap, *, strict_names: bool = True) -> str:
    parts: list[str] = []
    for name, value in attributes.items():
        name = _check_attr_name(name, strict_names)
        if value is True:
            parts.append(name)
        elif value is False:
            continue
        elif isinstance(value, str):
            parts.append(f'{name}="{escape(value, quote=True)}"')
        elif isinstance(value, (int, float)):
            parts.append(f'{name}="{format_number(value)}"')
        else:
            raise InvalidAttributeValue(name, value)
    return " ".join(parts)


def _render_content(content: Content, options: RenderOptions) -> str:
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, ElementNode):
        return render_node(content, options=options)
    return "".join(_render_content(item, options) for item in content)


def render_node(node: ElementNode, *, options: RenderOptions | None = None) -> str:
    options = options or DEFAULT_RENDER_OPTIONS
    tag = node.tag
    if not isinstance(tag, str) or not TAG_NAME_PATTERN.match(tag):
        raise InvalidTagName(tag)
    attrs = render_attributes(node.attributes, strict_names=options.strict_attribute_names)
    opening = f"<{tag} {attrs}" if attrs else f"<{tag}"
    if node.self_closing:
        if not _content_is_empty(node.content):
            raise SelfClosingWithContent(tag)
        return f"{opening}/>"
    return f"{opening}>{_render_content(node.content, options)}</{tag}>"


def to_html(node_or_content: Any, *, options: RenderOptions | None = None) -> str:
    if isinstance(node_or_content, ElementNode):
        return render_node(node_or_content, options=options)
    return _render_content(_normalize_content(node_or_content), options or DEFAULT_RENDER_OPTIONS)


def escape_text(text: Any) -> str:
    """Escape a text item; text content is otherwise emitted verbatim."""
    return escape(str(text), quote=False)

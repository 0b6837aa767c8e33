"""Declarative Bootstrap-style elements rendered to HTML strings.

Each element merges its default attributes with caller overrides (class
groups, negative class directives, ``:pseudo`` attributes) and renders into a
single escaped markup string.
"""

from .attributes import is_resolvable_class, merge_attributes
from .classes import (
    combine_classes,
    join_class_list,
    parse_class_list,
    resolve_classes,
    split_class_directives,
)
from .config import Config
from .core import (
    ElementNode,
    RenderOptions,
    component,
    el,
    escape_text,
    render_attributes,
    render_node,
    to_html,
)
from .errors import (
    ClassConflictWarning,
    ConfigError,
    InvalidAttributeName,
    InvalidAttributeValue,
    InvalidContentItem,
    InvalidTagName,
    MarkupError,
    MarkupWarning,
    MissingPseudoAttribute,
    SelfClosingWithContent,
    UnconsumedPseudoAttributeWarning,
)
from .kinds import ElementKind, generic
from .pseudo import (
    PseudoAttributes,
    consume_pseudo_attribute,
    consume_scoped_pseudo_attributes,
    split_pseudo_attribute,
    split_scoped_pseudo_attributes,
)

__version__ = "0.1.0"

__all__ = [
    "ClassConflictWarning",
    "Config",
    "ConfigError",
    "ElementKind",
    "ElementNode",
    "InvalidAttributeName",
    "InvalidAttributeValue",
    "InvalidContentItem",
    "InvalidTagName",
    "MarkupError",
    "MarkupWarning",
    "MissingPseudoAttribute",
    "PseudoAttributes",
    "RenderOptions",
    "SelfClosingWithContent",
    "UnconsumedPseudoAttributeWarning",
    "combine_classes",
    "component",
    "consume_pseudo_attribute",
    "consume_scoped_pseudo_attributes",
    "el",
    "escape_text",
    "generic",
    "is_resolvable_class",
    "join_class_list",
    "merge_attributes",
    "parse_class_list",
    "render_attributes",
    "render_node",
    "resolve_classes",
    "split_class_directives",
    "split_pseudo_attribute",
    "split_scoped_pseudo_attributes",
    "to_html",
]

from __future__ import annotations

from typing import Any


class MarkupError(ValueError):
    """Base class for errors raised while building or rendering markup."""


class InvalidTagName(MarkupError):
    def __init__(self, tag: Any) -> None:
        super().__init__(f"Invalid tag name: {tag!r}")
        self.tag = tag


class InvalidAttributeName(MarkupError):
    def __init__(self, name: Any) -> None:
        super().__init__(f"Invalid attribute name: {name!r}")
        self.name = name


class InvalidAttributeValue(MarkupError, TypeError):
    def __init__(self, name: str, value: Any) -> None:
        super().__init__(
            f"Attribute {name!r} must be bool, int, float or str; got {type(value).__name__}"
        )
        self.name = name
        self.value = value


class InvalidContentItem(MarkupError):
    def __init__(self, item: Any) -> None:
        super().__init__(
            f"Content items must be str or ElementNode; got {type(item).__name__}"
        )
        self.item = item


class SelfClosingWithContent(MarkupError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"Self-closing element <{tag}/> cannot have content")
        self.tag = tag


class MissingPseudoAttribute(KeyError, ValueError):
    """A component was built without a required pseudo-attribute.

    Raised while assembling components, so it is kept apart from `MarkupError`.
    """

    def __init__(self, key: str, component: str | None = None) -> None:
        where = f"{component} " if component else ""
        super().__init__(f"{where}requires a non-empty {key!r} attribute")
        self.key = key
        self.component = component

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class ConfigError(ValueError):
    pass


class MarkupWarning(UserWarning):
    """Base category for strapmark diagnostics."""


class UnconsumedPseudoAttributeWarning(MarkupWarning):
    pass


class ClassConflictWarning(MarkupWarning):
    pass

"""Class-list parsing and mutually exclusive class group resolution.

Class names are opaque tokens compared by string equality. A class group is a
set of tokens of which at most one may appear on an element; groups are given
either as space-separated strings or as iterables of tokens.
"""

from __future__ import annotations

import re
import warnings
from collections.abc import Iterable
from typing import Union

from .errors import ClassConflictWarning

ClassGroup = Union[str, Iterable[str]]

_WS_RE = re.compile(r"\s+")


def parse_class_list(text: str | None) -> list[str]:
    if text is None:
        return []
    text = _WS_RE.sub(" ", str(text).strip())
    if not text:
        return []
    return text.split(" ")


def join_class_list(tokens: Iterable[str]) -> str:
    return " ".join(tokens)


def _group_tokens(group: ClassGroup) -> list[str]:
    if isinstance(group, str):
        return parse_class_list(group)
    tokens: list[str] = []
    for part in group:
        tokens.extend(parse_class_list(part))
    return tokens


def split_class_directives(text: str | None) -> tuple[list[str], list[str]]:
    """Split user classes into (negative directive targets, positive tokens)."""
    negatives: list[str] = []
    positives: list[str] = []
    for token in parse_class_list(text):
        if token.startswith("-"):
            negatives.append(token[1:])
        else:
            positives.append(token)
    return negatives, positives


def resolve_classes(
    default_classes: str | None,
    user_classes: str | None,
    groups: Iterable[ClassGroup] = (),
    *,
    warn_on_dropped_groups: bool = False,
) -> str:
    """Merge default and user classes, honouring directives and class groups.

    Default tokens come first, followed by positive user tokens not already
    present. A user token such as ``-btn`` removes ``btn`` from the defaults and
    never appears in the output.

    For every group with two or more members in the merged set, all members are
    removed and the first positive user token belonging to the group (if any) is
    appended again. A conflict between defaults alone therefore drops the whole
    group.
    """
    negatives, positives = split_class_directives(user_classes)
    removed = set(negatives)

    # Dict keys double as an insertion-ordered set.
    merged: dict[str, None] = {}
    for token in parse_class_list(default_classes):
        if token not in removed:
            merged[token] = None
    for token in positives:
        merged.setdefault(token, None)

    for group in groups:
        members = set(_group_tokens(group))
        conflicting = [token for token in merged if token in members]
        if len(conflicting) < 2:
            continue
        for token in conflicting:
            del merged[token]
        chosen = next((token for token in positives if token in members), None)
        if chosen is not None:
            merged[chosen] = None
        elif warn_on_dropped_groups:
            warnings.warn(
                f"Dropped conflicting classes {' '.join(conflicting)!r} with no user preference",
                ClassConflictWarning,
                stacklevel=2,
            )

    return join_class_list(merged)


def combine_classes(*class_lists: str | None) -> str:
    """Order-preserving union of class strings; no groups, no directives."""
    merged: dict[str, None] = {}
    for class_list in class_lists:
        for token in parse_class_list(class_list):
            merged.setdefault(token, None)
    return join_class_list(merged)

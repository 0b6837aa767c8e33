from __future__ import annotations

import warnings

from strapmark import (
    ClassConflictWarning,
    combine_classes,
    join_class_list,
    parse_class_list,
    resolve_classes,
    split_class_directives,
)


def test_parse_class_list_trims_and_collapses_whitespace() -> None:
    assert parse_class_list("  btn \t btn-primary\n  active ") == ["btn", "btn-primary", "active"]


def test_parse_class_list_empty_inputs() -> None:
    assert parse_class_list("") == []
    assert parse_class_list("   \n\t") == []
    assert parse_class_list(None) == []


def test_join_then_parse_preserves_token_order() -> None:
    tokens = ["d-flex", "align-items-start", "me-3", "x"]
    assert parse_class_list(join_class_list(tokens)) == tokens


def test_split_class_directives_partitions_in_order() -> None:
    negatives, positives = split_class_directives("-btn btn-lg -active shadow")
    assert negatives == ["btn", "active"]
    assert positives == ["btn-lg", "shadow"]


def test_no_groups_is_ordered_union_defaults_first() -> None:
    assert resolve_classes("a b c", "c d b e", []) == "a b c d e"


def test_duplicates_collapse_to_first_occurrence() -> None:
    assert resolve_classes("a a b", "b b c c", []) == "a b c"


def test_user_token_wins_group_conflict_and_moves_to_end() -> None:
    groups = ["btn-primary btn-secondary btn-success"]
    assert resolve_classes("btn btn-primary", "btn-secondary", groups) == "btn btn-secondary"
    assert resolve_classes("btn-primary btn", "btn-success shadow", groups) == "btn shadow btn-success"


def test_first_user_token_in_group_is_the_one_kept() -> None:
    groups = ["sm md lg"]
    result = resolve_classes("md", "lg sm", groups)
    assert result == "lg"


def test_default_only_conflict_drops_whole_group() -> None:
    groups = ["btn-primary btn-secondary"]
    assert resolve_classes("btn btn-primary btn-secondary", "", groups) == "btn"


def test_default_only_conflict_can_warn_when_requested() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = resolve_classes("x y", "", ["x y"], warn_on_dropped_groups=True)
    assert result == ""
    assert any(isinstance(w.message, ClassConflictWarning) for w in caught)


def test_single_member_of_group_is_left_alone() -> None:
    assert resolve_classes("btn btn-primary", "shadow", ["btn-primary btn-secondary"]) == "btn btn-primary shadow"


def test_groups_accept_token_iterables() -> None:
    assert resolve_classes("a", "b", [("a", "b")]) == "b"


def test_groups_are_applied_in_declaration_order() -> None:
    groups = ["a b", "b c"]
    # First group keeps the user's b, second group then resolves b against c.
    assert resolve_classes("a c", "b", groups) == "b"
    assert resolve_classes("a", "c", groups) == "a c"
    assert resolve_classes("a c d", "", groups) == "a c d"


def test_negative_directive_removes_default_and_never_reappears() -> None:
    assert resolve_classes("btn btn-primary", "-btn btn-lg", []) == "btn-primary btn-lg"
    assert resolve_classes("x y", "-x", ["x y"]) == "y"


def test_negative_directive_for_absent_class_is_ignored() -> None:
    assert resolve_classes("a", "-z b", []) == "a b"


def test_directives_never_appear_in_output() -> None:
    result = resolve_classes("", "-a -b", [])
    assert result == ""


def test_combine_classes_is_plain_union() -> None:
    assert combine_classes("form-check", "form-switch form-check", None, " extra ") == "form-check form-switch extra"

from __future__ import annotations

import pytest

from strapmark import (
    MissingPseudoAttribute,
    PseudoAttributes,
    consume_pseudo_attribute,
    consume_scoped_pseudo_attributes,
    split_pseudo_attribute,
    split_scoped_pseudo_attributes,
)


def test_consume_removes_key_and_returns_value() -> None:
    attrs = {":label": "Email", "class": "x"}
    assert consume_pseudo_attribute(attrs, ":label") == "Email"
    assert attrs == {"class": "x"}


def test_consume_is_once_only() -> None:
    attrs = {":label": "Email"}
    assert consume_pseudo_attribute(attrs, ":label", "fallback") == "Email"
    assert consume_pseudo_attribute(attrs, ":label", "fallback") == "fallback"


@pytest.mark.parametrize("key", ["label", ":1abc", ":", ":has space", "::x", ":bad_underscore"])
def test_malformed_key_returns_default_and_leaves_map(key: str) -> None:
    attrs = {key: "value"}
    assert consume_pseudo_attribute(attrs, key, "default") == "default"
    assert attrs == {key: "value"}


def test_consume_from_missing_or_empty_map_returns_default() -> None:
    assert consume_pseudo_attribute(None, ":label", 7) == 7
    assert consume_pseudo_attribute({}, ":label", 7) == 7


def test_consume_preserves_falsy_values() -> None:
    attrs = {":disabled": False}
    assert consume_pseudo_attribute(attrs, ":disabled", True) is False
    assert attrs == {}


def test_consume_scoped_strips_prefix_and_keeps_order() -> None:
    attrs = {
        "class": "outer",
        ":input:class": "is-invalid",
        ":label:class": "fw-bold",
        ":input:data-x": "1",
        ":input:": "ignored",
    }
    scoped = consume_scoped_pseudo_attributes(attrs, "input")
    assert list(scoped.items()) == [("class", "is-invalid"), ("data-x", "1")]
    assert attrs == {"class": "outer", ":label:class": "fw-bold", ":input:": "ignored"}


def test_consume_scoped_on_missing_map() -> None:
    assert consume_scoped_pseudo_attributes(None, "input") == {}


def test_split_forms_do_not_mutate_input() -> None:
    attrs = {":label": "Name", ":input:id": "n", "class": "x"}
    value, remaining = split_pseudo_attribute(attrs, ":label")
    assert value == "Name"
    assert remaining == {":input:id": "n", "class": "x"}

    scoped, remaining = split_scoped_pseudo_attributes(attrs, "input")
    assert scoped == {"id": "n"}
    assert remaining == {":label": "Name", "class": "x"}

    assert attrs == {":label": "Name", ":input:id": "n", "class": "x"}


def test_builder_consumes_from_private_copy() -> None:
    raw = {":label": "Name", ":help:class": "small", ":stray": 1, "id": "a"}
    bag = PseudoAttributes(raw)
    assert bag.consume(":label") == "Name"
    assert bag.consume_scoped("help") == {"class": "small"}
    assert bag.unconsumed() == [":stray"]
    assert bag.remaining() == {":stray": 1, "id": "a"}
    assert ":label" not in bag
    assert len(raw) == 4


def test_builder_require_raises_for_missing_or_empty() -> None:
    with pytest.raises(MissingPseudoAttribute) as info:
        PseudoAttributes({}, component="PillTab").require(":key")
    assert info.value.key == ":key"
    assert "PillTab" in str(info.value)

    with pytest.raises(MissingPseudoAttribute):
        PseudoAttributes({":key": ""}).require(":key")
    with pytest.raises(KeyError):
        PseudoAttributes({":key": 3}).require(":key")

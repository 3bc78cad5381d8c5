"""Tests for StructValidator field discovery and rule dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel, Field

from custom_validator.traversal.errors import (
    InvalidTagError,
    InvalidValidationError,
    RuleRegistrationError,
    UndefinedRuleError,
    ValidationErrors,
)
from custom_validator.traversal.level import FieldLevel
from custom_validator.traversal.walker import DEFAULT_TAG_NAME, StructValidator, is_struct

TAG = "check"


def _is_upper(fl: FieldLevel) -> bool:
    return fl.as_string().isupper()


def _validator() -> StructValidator:
    validator = StructValidator(tag_name=TAG)
    validator.register_validation("is-upper", _is_upper)
    return validator


class Shout(BaseModel):
    word: str = Field(json_schema_extra={TAG: "is-upper"})
    note: str = ""


@dataclass
class Team:
    code: str = field(metadata={TAG: "len=3,is-upper"})
    size: int = field(default=1, metadata={TAG: "min=1,max=11"})


class Inner(BaseModel):
    word: str = Field(json_schema_extra={TAG: "is-upper"})


class Outer(BaseModel):
    name: str = Field(json_schema_extra={TAG: "required"})
    inner: Inner


def _failures(validator: StructValidator, obj: object) -> list[tuple[str, str]]:
    with pytest.raises(ValidationErrors) as exc_info:
        validator.struct(obj)
    return [(fe.namespace, fe.tag) for fe in exc_info.value]


class TestStruct:
    def test_valid_model_returns_none(self) -> None:
        assert _validator().struct(Shout(word="HEY")) is None

    def test_failure_carries_field_details(self) -> None:
        with pytest.raises(ValidationErrors) as exc_info:
            _validator().struct(Shout(word="hey"))
        (fe,) = exc_info.value.errors
        assert fe.field == "word"
        assert fe.namespace == "Shout.word"
        assert fe.tag == "is-upper"
        assert fe.value == "hey"
        assert fe.param == ""

    def test_dataclass_fields_are_read_from_metadata(self) -> None:
        failures = _failures(_validator(), Team(code="ABCD", size=12))
        assert failures == [("Team.code", "len"), ("Team.size", "max")]

    def test_first_failing_rule_stops_the_field(self) -> None:
        failures = _failures(_validator(), Team(code="ab"))
        assert failures == [("Team.code", "len")]

    def test_nested_struct_is_walked(self) -> None:
        failures = _failures(_validator(), Outer(name="", inner=Inner(word="low")))
        assert failures == [("Outer.name", "required"), ("Outer.inner.word", "is-upper")]

    def test_annotations_under_other_keys_are_ignored(self) -> None:
        validator = StructValidator(tag_name="other")
        assert validator.struct(Shout(word="quiet")) is None

    def test_skip_marker_excludes_field(self) -> None:
        @dataclass
        class Skipped:
            word: str = field(default="low", metadata={TAG: "-"})

        assert _validator().struct(Skipped()) is None

    def test_omitempty_skips_empty_values_only(self) -> None:
        @dataclass
        class Maybe:
            word: str = field(default="", metadata={TAG: "omitempty,is-upper"})

        validator = _validator()
        assert validator.struct(Maybe()) is None
        assert _failures(validator, Maybe(word="low")) == [("Maybe.word", "is-upper")]

    @pytest.mark.parametrize("annotation", [["is-upper"], 3, {"rule": "is-upper"}])
    def test_non_string_annotation_is_tag_error(self, annotation: object) -> None:
        @dataclass
        class Listed:
            word: str = field(default="low", metadata={TAG: annotation})

        with pytest.raises(InvalidTagError, match="must be a string"):
            _validator().struct(Listed())

    def test_non_string_annotation_on_model_is_tag_error(self) -> None:
        class Listed(BaseModel):
            word: str = Field(default="low", json_schema_extra={TAG: ["is-upper"]})

        with pytest.raises(InvalidTagError, match="field 'word'"):
            _validator().struct(Listed())

    def test_self_referencing_struct_is_walked_once(self) -> None:
        @dataclass
        class Node:
            label: str = field(default="low", metadata={TAG: "is-upper"})
            nxt: object = None

        node = Node()
        node.nxt = node
        assert _failures(_validator(), node) == [("Node.label", "is-upper")]

    def test_two_node_cycle_visits_each_node_once(self) -> None:
        @dataclass
        class Node:
            label: str = field(default="", metadata={TAG: "is-upper"})
            nxt: object = None

        first = Node(label="HI")
        second = Node(label="low", nxt=first)
        first.nxt = second
        assert _failures(_validator(), first) == [("Node.nxt.label", "is-upper")]

    def test_undefined_rule_raises(self) -> None:
        @dataclass
        class Mystery:
            value: str = field(default="x", metadata={TAG: "no-such-rule"})

        with pytest.raises(UndefinedRuleError, match="no-such-rule"):
            _validator().struct(Mystery())

    @pytest.mark.parametrize("target", [None, 42, "text", {"word": "HEY"}, Shout, Team])
    def test_non_struct_targets_raise(self, target: object) -> None:
        with pytest.raises(InvalidValidationError):
            _validator().struct(target)


class TestRegistration:
    def test_default_tag_name(self) -> None:
        assert StructValidator().tag_name == DEFAULT_TAG_NAME

    def test_set_tag_name(self) -> None:
        validator = StructValidator()
        validator.set_tag_name(TAG)
        assert validator.tag_name == TAG

    def test_empty_tag_name_rejected(self) -> None:
        with pytest.raises(RuleRegistrationError):
            StructValidator().set_tag_name("")

    def test_registered_rule_is_listed(self) -> None:
        validator = _validator()
        assert validator.has_rule("is-upper")
        assert "is-upper" in validator.rules
        assert "required" in validator.rules

    @pytest.mark.parametrize("tag", ["", "required", "omitempty"])
    def test_invalid_tags_rejected(self, tag: str) -> None:
        with pytest.raises(RuleRegistrationError):
            StructValidator().register_validation(tag, _is_upper)

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(RuleRegistrationError, match="not callable"):
            StructValidator().register_validation("is-upper", "nope")  # type: ignore[arg-type]


def test_is_struct() -> None:
    assert is_struct(Shout(word="A"))
    assert is_struct(Team(code="ABC"))
    assert not is_struct(Team)
    assert not is_struct({"code": "ABC"})

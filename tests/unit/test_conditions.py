"""Tests for the Condition value object and its evaluators."""

import pytest

from admissions.domain.enums import ConditionKind
from admissions.domain.value_objects.condition import ALWAYS, Condition, evaluate


class TestAlways:
    def test_true_for_any_context(self) -> None:
        assert ALWAYS.evaluate({}) is True
        assert ALWAYS.evaluate(None) is True
        assert ALWAYS.evaluate({"anything": 1}) is True

    def test_absent_condition_is_true(self) -> None:
        assert evaluate(None, {}) is True


class TestScoreGreaterThan:
    """scoreGreaterThan: strictly greater; non-numeric or missing fails."""

    @pytest.fixture
    def condition(self) -> Condition:
        return Condition(ConditionKind.SCORE_GREATER_THAN, field="score", threshold=75.0)

    def test_numbers(self, condition: Condition) -> None:
        assert condition.evaluate({"score": 76}) is True
        assert condition.evaluate({"score": 75.5}) is True
        assert condition.evaluate({"score": 75}) is False
        assert condition.evaluate({"score": 10}) is False

    def test_integers_beyond_float_range(self, condition: Condition) -> None:
        assert condition.evaluate({"score": 10**400}) is True
        assert condition.evaluate({"score": -(10**400)}) is False
        assert condition.evaluate({"score": "1" + "0" * 400}) is True

    def test_numeric_strings(self, condition: Condition) -> None:
        assert condition.evaluate({"score": "80"}) is True
        assert condition.evaluate({"score": " 80.5 "}) is True
        assert condition.evaluate({"score": "75"}) is False

    def test_unparseable_or_missing_fails(self, condition: Condition) -> None:
        assert condition.evaluate({"score": "high"}) is False
        assert condition.evaluate({"score": None}) is False
        assert condition.evaluate({"score": True}) is False
        assert condition.evaluate({}) is False

    def test_requires_field_and_threshold(self) -> None:
        with pytest.raises(ValueError, match="field"):
            Condition(ConditionKind.SCORE_GREATER_THAN, threshold=1.0)
        with pytest.raises(ValueError, match="threshold"):
            Condition(ConditionKind.SCORE_GREATER_THAN, field="score")


class TestEquals:
    """equals: compares the value's string form; case-sensitive."""

    @pytest.fixture
    def condition(self) -> Condition:
        return Condition(ConditionKind.EQUALS, field="decision", value="passed_interview")

    def test_match(self, condition: Condition) -> None:
        assert condition.evaluate({"decision": "passed_interview"}) is True

    def test_mismatch_and_case(self, condition: Condition) -> None:
        assert condition.evaluate({"decision": "failed_interview"}) is False
        assert condition.evaluate({"decision": "PASSED_INTERVIEW"}) is False

    def test_missing_or_null_fails(self, condition: Condition) -> None:
        assert condition.evaluate({}) is False
        assert condition.evaluate({"decision": None}) is False

    def test_non_string_values_compare_as_text(self) -> None:
        numeric = Condition(ConditionKind.EQUALS, field="n", value="42")
        flag = Condition(ConditionKind.EQUALS, field="ok", value="true")
        assert numeric.evaluate({"n": 42}) is True
        assert flag.evaluate({"ok": True}) is True
        assert flag.evaluate({"ok": False}) is False

    def test_requires_value(self) -> None:
        with pytest.raises(ValueError, match="value"):
            Condition(ConditionKind.EQUALS, field="decision")


def test_to_dict_round_trips_descriptor_fields() -> None:
    condition = Condition(ConditionKind.SCORE_GREATER_THAN, field="score", threshold=75.0)
    assert condition.to_dict() == {
        "type": "scoreGreaterThan",
        "field": "score",
        "threshold": 75.0,
    }
    assert ALWAYS.to_dict() == {"type": "always"}

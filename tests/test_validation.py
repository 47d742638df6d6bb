"""Tests for wren.validation.rules — rule kinds and their messages."""

import pytest

from wren.errors import ConfigurationError
from wren.forms import Form
from wren.validation import (
    VALID,
    Invalid,
    Rule,
    Valid,
    between_length,
    confirmation,
    email,
    matches,
    max_length,
    min_length,
    one_of,
    required,
)

# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


class TestOutcomes:
    def test_valid_equality(self) -> None:
        assert Valid() == VALID

    def test_invalid_carries_message(self) -> None:
        assert Invalid("bad").message == "bad"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Invalid("bad").message = "worse"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Individual rule tests
# ---------------------------------------------------------------------------


class TestRequired:
    def test_empty_string(self) -> None:
        assert required()("") == Invalid("The {attribute} field is required.")

    @pytest.mark.parametrize("value", ["a", "hello", " ", "\t"])
    def test_non_empty(self, value: str) -> None:
        assert required()(value) == VALID

    def test_is_rule(self) -> None:
        assert isinstance(required(), Rule)


class TestEmail:
    @pytest.mark.parametrize(
        "value",
        ["user@example.com", "a+tag@b.co", "first.last@sub.domain.org", "see: x@y.z please"],
    )
    def test_valid(self, value: str) -> None:
        assert email()(value) == VALID

    @pytest.mark.parametrize("value", ["", "bad", "userexample.com", "user@", "user@host", "@b.co"])
    def test_invalid(self, value: str) -> None:
        assert email()(value) == Invalid("The {attribute} must be a valid email address.")


class TestMinLength:
    def test_at_minimum(self) -> None:
        assert min_length(3)("abc") == VALID

    def test_above_minimum(self) -> None:
        assert min_length(3)("abcd") == VALID

    def test_below_minimum_substitutes_min(self) -> None:
        outcome = min_length(3)("ab")
        assert outcome == Invalid("The {attribute} must be at least 3 characters.")

    def test_zero_minimum_accepts_empty(self) -> None:
        assert min_length(0)("") == VALID

    def test_negative_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            min_length(-1)


class TestMaxLength:
    def test_at_limit(self) -> None:
        assert max_length(5)("12345") == VALID

    def test_exceeds_limit(self) -> None:
        outcome = max_length(5)("123456")
        assert outcome == Invalid("The {attribute} must not be greater than 5 characters")

    def test_empty_passes(self) -> None:
        assert max_length(5)("") == VALID


class TestBetweenLength:
    def test_inside_range(self) -> None:
        assert between_length(3, 16)("alice") == VALID

    def test_bounds_inclusive(self) -> None:
        rule = between_length(3, 16)
        assert rule("abc") == VALID
        assert rule("a" * 16) == VALID

    def test_too_short(self) -> None:
        outcome = between_length(3, 16)("ab")
        assert outcome == Invalid("The {attribute} must be between 3 and 16 characters.")

    def test_too_long(self) -> None:
        assert isinstance(between_length(3, 16)("a" * 17), Invalid)

    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="greater than max"):
            between_length(16, 3)


class TestConfirmation:
    def test_matches_live_value(self) -> None:
        form = Form({"password": "secret"})
        assert confirmation("password")("secret", form) == VALID

    def test_mismatch(self) -> None:
        form = Form({"password": "secret"})
        outcome = confirmation("password")("other", form)
        assert outcome == Invalid("The {attribute} confirmation does not match.")

    def test_rereads_referenced_field(self) -> None:
        form = Form({"password": "first"})
        rule = confirmation("password")
        assert rule("first", form) == VALID

        form.set_value("password", "second")
        assert isinstance(rule("first", form), Invalid)
        assert rule("second", form) == VALID

    def test_references(self) -> None:
        assert confirmation("password").references == ("password",)

    def test_without_lookup_is_misuse(self) -> None:
        with pytest.raises(ConfigurationError, match="needs a value lookup"):
            confirmation("password")("secret")

    def test_empty_target_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            confirmation("")


class TestMatches:
    def test_valid_pattern(self) -> None:
        assert matches(r"\d{3}$")("123") == VALID

    def test_anchored_at_start(self) -> None:
        assert isinstance(matches(r"\d+")("abc123"), Invalid)

    def test_default_message(self) -> None:
        assert matches(r"\d+")("x") == Invalid("The {attribute} format is invalid.")

    def test_custom_message(self) -> None:
        outcome = matches(r"^\d+$", message="The {attribute} must be numeric.")("abc")
        assert outcome == Invalid("The {attribute} must be numeric.")

    def test_bad_pattern_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid pattern"):
            matches("(")


class TestOneOf:
    def test_valid_choice(self) -> None:
        assert one_of("red", "green", "blue")("red") == VALID

    def test_invalid_choice(self) -> None:
        assert one_of("red", "green")("purple") == Invalid("The selected {attribute} is invalid.")

    def test_no_choices_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            one_of()


class TestRuleValues:
    def test_rules_compare_by_parameters(self) -> None:
        assert min_length(3) == min_length(3)
        assert min_length(3) != min_length(4)

    def test_rules_are_frozen(self) -> None:
        rule = min_length(3)
        with pytest.raises(AttributeError):
            rule.min = 5  # type: ignore[attr-defined]

    def test_non_relational_rules_reference_nothing(self) -> None:
        for rule in (required(), email(), min_length(1), max_length(1), between_length(1, 2)):
            assert rule.references == ()

"""Tests for wren.validation.templating — {name} placeholder substitution."""

from wren.validation.templating import render


class TestRender:
    def test_substitutes_known_placeholder(self) -> None:
        result = render("The {attribute} must be at least {min} characters.", {"min": 3})
        assert result == "The {attribute} must be at least 3 characters."

    def test_two_stage_message(self) -> None:
        stage_one = render("The {attribute} must be at least {min} characters.", {"min": 3})
        stage_two = render(stage_one, {"attribute": "password"}, True)
        assert stage_two == "The password must be at least 3 characters."

    def test_unmatched_left_wrapped(self) -> None:
        assert render("{x}", {}) == "{x}"

    def test_unmatched_unwrapped(self) -> None:
        assert render("{x}", {}, True) == "x"

    def test_unwrap_only_affects_unmatched(self) -> None:
        assert render("{a} and {b}", {"a": "one"}, True) == "one and b"

    def test_no_placeholders(self) -> None:
        assert render("Nothing to do.", {"x": "y"}) == "Nothing to do."

    def test_empty_template(self) -> None:
        assert render("", {"x": "y"}, True) == ""

    def test_repeated_placeholder(self) -> None:
        assert render("{x}-{x}", {"x": "a"}) == "a-a"


class TestFalsyReplacements:
    """Falsy values count as missing, not as present-but-empty."""

    def test_zero_treated_as_missing(self) -> None:
        assert render("{x}", {"x": 0}) == "{x}"

    def test_zero_unwrapped(self) -> None:
        assert render("{x}", {"x": 0}, True) == "x"

    def test_empty_string_treated_as_missing(self) -> None:
        assert render("The {attribute} field", {"attribute": ""}, True) == "The attribute field"

    def test_none_treated_as_missing(self) -> None:
        assert render("{x}", {"x": None}) == "{x}"


class TestTokenSyntax:
    def test_single_pass_no_recursion(self) -> None:
        """A substituted value that looks like a placeholder stays literal."""
        assert render("{a}", {"a": "{b}", "b": "deep"}) == "{b}"

    def test_non_word_characters_ignored(self) -> None:
        assert render("{not-a-token}", {"not-a-token": "x"}, True) == "{not-a-token}"

    def test_underscore_and_digits(self) -> None:
        assert render("{max_2}", {"max_2": 16}) == "16"

    def test_empty_braces_untouched(self) -> None:
        assert render("{}", {}, True) == "{}"

    def test_non_ascii_identifier_untouched(self) -> None:
        assert render("{é}", {"é": "x"}, True) == "{é}"

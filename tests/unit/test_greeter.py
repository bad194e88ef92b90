"""
Tests for the greeting service.

Checked invariants:
1. greet("World") == "Hello, World!"
2. greet is plain concatenation: no stripping, no validation
3. build_greeting rejects blank / oversized names with structured errors
"""

import pytest

from core.domain.language import Language
from core.domain.models import MAX_NAME_LENGTH, Greeting
from core.errors import HelloError, InvalidNameError
from core.services.greeter import build_greeting, check_name, greet


# =============================================================================
# greet
# =============================================================================


class TestGreet:
    """greet: pure string building."""

    def test_hello_world(self):
        assert greet("World") == "Hello, World!"

    def test_other_names(self):
        assert greet("Ada") == "Hello, Ada!"
        assert greet("Rich Hickey") == "Hello, Rich Hickey!"

    def test_no_edge_case_policy(self):
        """Input is concatenated as-is, even empty or padded."""
        assert greet("") == "Hello, !"
        assert greet("  Bob ") == "Hello,   Bob !"

    def test_spanish(self):
        assert greet("Mundo", language=Language.SPANISH) == "¡Hola, Mundo!"

    def test_language_accepts_raw_value(self):
        assert greet("Mundo", language="es") == "¡Hola, Mundo!"

    def test_deterministic(self):
        assert greet("World") == greet("World")


# =============================================================================
# build_greeting
# =============================================================================


class TestBuildGreeting:
    """build_greeting: validation + aggregate."""

    def test_builds_model(self):
        greeting = build_greeting("World")
        assert isinstance(greeting, Greeting)
        assert greeting.name == "World"
        assert greeting.message == "Hello, World!"
        assert greeting.language is Language.ENGLISH

    def test_default_language_when_none(self):
        assert build_greeting("World", language=None).language is Language.default()

    def test_spanish(self):
        greeting = build_greeting("Ada", language=Language.SPANISH)
        assert greeting.message == "¡Hola, Ada!"
        assert greeting.language is Language.SPANISH

    def test_generated_at_is_utc(self):
        greeting = build_greeting("World")
        assert greeting.generated_at.utcoffset().total_seconds() == 0

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_rejected(self, name):
        with pytest.raises(InvalidNameError) as exc_info:
            build_greeting(name)

        err = exc_info.value
        assert err.name == name
        assert err.details == {"name": name, "reason": "name must not be blank"}
        assert isinstance(err, HelloError)

    def test_too_long_name_rejected(self):
        with pytest.raises(InvalidNameError, match="at most"):
            build_greeting("x" * (MAX_NAME_LENGTH + 1))

    def test_max_length_accepted(self):
        name = "x" * MAX_NAME_LENGTH
        assert build_greeting(name).name == name

    def test_padded_max_length_accepted(self):
        """Limit applies to the stripped name; padding is kept in the message."""
        name = "  " + "x" * MAX_NAME_LENGTH + "  "
        greeting = build_greeting(name)
        assert greeting.name == name
        assert greeting.message == "Hello, " + name + "!"


# =============================================================================
# check_name / errors
# =============================================================================


class TestCheckName:
    def test_returns_name(self):
        assert check_name(" Ada ") == " Ada "

    def test_raises_with_details(self):
        with pytest.raises(InvalidNameError) as exc_info:
            check_name("")
        assert exc_info.value.reason == "name must not be blank"


class TestHelloError:
    def test_details_dict(self):
        err = HelloError("boom", {"message": "inner", "code": 3})
        assert str(err) == "boom"
        assert err.details == {"message": "inner", "code": 3}

    def test_details_default_empty(self):
        assert HelloError("boom").details == {}

    def test_details_copied(self):
        details = {"a": 1}
        err = HelloError("boom", details)
        details["a"] = 2
        assert err.details == {"a": 1}

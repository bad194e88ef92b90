"""Greeting service.

`greet` is the pure building block: plain string concatenation, no
validation. `build_greeting` is what entry-points use; it rejects blank or
oversized names and returns the structured `Greeting`.
"""

from __future__ import annotations

import logging

from core.domain.language import Language
from core.domain.models import Greeting, name_problem
from core.errors import InvalidNameError

logger = logging.getLogger("hello_d2.greeter")

_TEMPLATES: dict[Language, tuple[str, str]] = {
    Language.ENGLISH: ("Hello, ", "!"),
    Language.SPANISH: ("¡Hola, ", "!"),
}


def greet(name: str, *, language: Language = Language.ENGLISH) -> str:
    """Return the greeting for `name`, e.g. ``greet("World") -> "Hello, World!"``."""

    prefix, suffix = _TEMPLATES[Language(language)]
    return prefix + name + suffix


def check_name(name: str) -> str:
    """Return `name` unchanged if it can be greeted.

    Raises:
        InvalidNameError: if the name is blank or longer than the limit once stripped.
    """

    problem = name_problem(name)
    if problem:
        raise InvalidNameError(name, problem)
    return name


def build_greeting(name: str, *, language: Language | None = None) -> Greeting:
    """Validate `name` and build the `Greeting` aggregate.

    Raises:
        InvalidNameError: see `check_name`.
    """

    language = Language(language) if language is not None else Language.default()
    check_name(name)

    message = greet(name, language=language)
    logger.debug("greeting built name=%r language=%s", name, language.value)
    return Greeting(name=name, message=message, language=language)

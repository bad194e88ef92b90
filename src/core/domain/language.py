"""Greeting languages.

Shared by the CLI, the settings and the greeter; lives in the domain layer
so none of them import each other for it.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Language of the greeting text."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    @classmethod
    def resolve(cls, spanish: bool, fallback: "Language | None" = None) -> "Language":
        """Pick the language for one run.

        `--spanish` wins; otherwise the configured `fallback`, otherwise the
        default.
        """

        if spanish:
            return cls.SPANISH
        return cls(fallback) if fallback is not None else cls.default()

    def label(self) -> str:
        """Name shown in tables and panels."""

        return {Language.ENGLISH: "English", Language.SPANISH: "Spanish"}[self]

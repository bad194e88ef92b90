"""Domain models (Pydantic v2).

Why Pydantic here:
- Strict validation at the edge (the name typed on the command line).
- Stable JSON serialization for `--json` and `--output`.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from core.domain.language import Language

MAX_NAME_LENGTH = 256


def name_problem(name: str) -> str | None:
    """Why `name` cannot be greeted, or None when it is usable.

    Length is measured on the stripped name; surrounding whitespace is kept
    in the greeting but does not count against the limit.
    """

    stripped = name.strip()
    if not stripped:
        return "name must not be blank"
    if len(stripped) > MAX_NAME_LENGTH:
        return f"name must be at most {MAX_NAME_LENGTH} characters"
    return None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Greeting(BaseModel):
    """A rendered greeting addressed to someone."""

    name: str = Field(
        ...,
        description="Who is being greeted (1..256 chars once stripped).",
    )
    message: str = Field(
        ...,
        min_length=1,
        description="Final greeting text, e.g. 'Hello, World!'.",
    )
    language: Language = Field(
        default=Language.ENGLISH,
        description="Language the message was rendered in.",
    )
    generated_at: datetime = Field(
        default_factory=_utcnow,
        description="Creation time (UTC).",
    )

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        problem = name_problem(value)
        if problem:
            raise ValueError(problem)
        return value

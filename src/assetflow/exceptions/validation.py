"""Structured validation error model for transformation config checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single validation error with stable code and location context."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        parts = [f"[{self.code}]", self.path, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort validation errors deterministically by code, path, field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field, e.message))


def format_errors(errors: list[ValidationError]) -> str:
    """Format a list of validation errors as a multi-line string."""
    return "\n".join(e.format() for e in sort_errors(errors))

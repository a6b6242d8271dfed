"""Contains results of a Claude description generation attempt."""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class GenerationSucceeded:
    """Claude produced a usable, sanitized description."""

    description: str


@dataclass(frozen=True)
class GenerationFailed:
    """Claude could not be used; carries the underlying exception."""

    error: Exception


GenerationResult: TypeAlias = GenerationSucceeded | GenerationFailed

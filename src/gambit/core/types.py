"""Field type and coordinate helpers.

Fields are ``(rank, file)`` pairs, both zero-based:
    (0, 0) = a1, (0, 7) = h1, (7, 0) = a8, (7, 7) = h8
"""

from __future__ import annotations

from typing import NamedTuple

FILES = "abcdefgh"
RANKS = "12345678"


class Field(NamedTuple):
    """A board square addressed by rank and file."""

    rank: int
    file: int

    def __str__(self) -> str:
        return field_name(self)


def field_name(field: Field) -> str:
    """Algebraic name, e.g. ``Field(0, 4)`` → ``'e1'``."""
    return FILES[field.file] + RANKS[field.rank]


def parse_field(name: str) -> Field:
    """Parse an algebraic square name, e.g. ``'e4'`` → ``Field(3, 4)``."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Field(RANKS.index(name[1]), FILES.index(name[0]))


def all_fields() -> list[Field]:
    """Every field, a1 first, rank by rank."""
    return [Field(rank, file) for rank in range(8) for file in range(8)]

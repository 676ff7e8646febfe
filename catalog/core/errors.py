# catalog/core/errors.py
"""
Outcome types for store writes that callers must branch on.

Product creation never raises for store-side rejections: the repository
returns one of `Created`, `DuplicateKey` or `StoreError` and the router
maps them onto HTTP statuses.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Created:
    id: Any


@dataclass(frozen=True)
class DuplicateKey:
    message: str


@dataclass(frozen=True)
class StoreError:
    message: str


InsertOutcome = Union[Created, DuplicateKey, StoreError]


class SeedRefusedError(RuntimeError):
    """Raised when the seed loader is asked to drop data without permission."""

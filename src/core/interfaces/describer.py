"""Description provider contract.

Why Protocol:
- The static man-page table and the platform's libc functions are
  interchangeable sources; resolvers only need `describe`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Entry


@runtime_checkable
class DescriptionProvider(Protocol):
    """Minimal contract for a description source.

    Returning an empty string means "nothing known"; the caller substitutes
    its own "Unknown error"/"Unknown signal" text.
    """

    def describe(self, entry: Entry) -> str:
        ...

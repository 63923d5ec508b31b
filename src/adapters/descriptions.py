"""Description providers.

Two interchangeable sources per domain:
- `StaticDescriptions`: the compiled-in man-page text.
- `LibcErrnoDescriptions` / `LibcSignalDescriptions`: the platform's
  strerror(3) / strsignal(3), through `os.strerror` and `signal.strsignal`.

The libc providers return an empty string when the platform has nothing to
say; the resolver then shows its "Unknown error"/"Unknown signal" text.
"""

from __future__ import annotations

import os
import signal

from core.domain.models import Entry
from core.interfaces.describer import DescriptionProvider


class StaticDescriptions(DescriptionProvider):
    """Descriptions taken from the lookup table itself."""

    def describe(self, entry: Entry) -> str:
        return entry.description


class LibcErrnoDescriptions(DescriptionProvider):
    """Descriptions from strerror(3)."""

    def describe(self, entry: Entry) -> str:
        if entry.number is None:
            return ""
        try:
            return os.strerror(entry.number)
        except ValueError:
            return ""


class LibcSignalDescriptions(DescriptionProvider):
    """Descriptions from strsignal(3)."""

    def describe(self, entry: Entry) -> str:
        if entry.number is None:
            return ""
        try:
            return signal.strsignal(entry.number) or ""
        except ValueError:
            # Out of range for this platform.
            return ""


def errno_describer(libc: bool) -> DescriptionProvider:
    return LibcErrnoDescriptions() if libc else StaticDescriptions()


def signal_describer(libc: bool) -> DescriptionProvider:
    return LibcSignalDescriptions() if libc else StaticDescriptions()

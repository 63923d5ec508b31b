"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Entries are immutable values (frozen models) shared by the three tools.
- `model_dump(mode="json")` gives `--json` output for free.

Note:
- These models describe *what* a lookup result is, not *how* it is printed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

PLACEHOLDER = "-"

Row = tuple[str, ...]


class Entry(BaseModel):
    """A named code of the errno or signal table.

    `primary` is False for aliases that share a number with another entry
    (e.g. `EWOULDBLOCK`); the number index only contains primary entries.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Symbolic name (e.g. 'ENOENT', 'SIGINT').",
    )
    number: int | None = Field(
        default=None,
        description="Platform value, or None when the platform does not define it.",
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Human readable description (Linux man-pages 6.01).",
    )
    primary: bool = Field(
        default=True,
        description="Whether the entry is returned when looking up its number.",
    )


class CharEntry(BaseModel):
    """One of the 128 ASCII characters."""

    model_config = ConfigDict(frozen=True)

    code: int = Field(..., ge=0, le=0x7F)
    display: str = Field(
        ...,
        min_length=1,
        description="Printable representation (mnemonic for control characters).",
    )

    @computed_field
    @property
    def hex(self) -> str:
        return f"0x{self.code:02X}"

    @computed_field
    @property
    def dec(self) -> str:
        return str(self.code)

    @computed_field
    @property
    def oct(self) -> str:
        return f"0o{self.code:03o}"

    @computed_field
    @property
    def bin(self) -> str:
        return f"0b{self.code:07b}"


class Lookup(BaseModel):
    """Result of resolving one errno/signal query.

    `entry is None` means the query was not recognized. `number` keeps the
    parsed number even then, so unknown numbers still show what was asked.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    entry: Entry | None = None
    name: str = Field(default=PLACEHOLDER)
    number: int | None = None
    description: str

    @property
    def known(self) -> bool:
        return self.entry is not None

    def cells(self) -> Row:
        number = PLACEHOLDER if self.number is None else str(self.number)
        return (self.name, number, self.description)


class CharLookup(BaseModel):
    """Result of resolving one ASCII query."""

    model_config = ConfigDict(frozen=True)

    query: str
    char: CharEntry | None = None

    @property
    def known(self) -> bool:
        return self.char is not None

    def cells(self) -> Row:
        if self.char is None:
            return (self.query, PLACEHOLDER, PLACEHOLDER, PLACEHOLDER, PLACEHOLDER)
        c = self.char
        return (c.display, c.hex, c.dec, c.oct, c.bin)

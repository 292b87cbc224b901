"""Column-major text table handed over by the spreadsheet reader."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field


class RawColumn(BaseModel):
    """One named column of raw text cells, one cell per employee row."""

    name: str
    cells: list[str] = Field(default_factory=list)


class RawTable(BaseModel):
    """Ordered named columns; cell j of every column describes the same row."""

    columns: list[RawColumn] = Field(default_factory=list)

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[str]]) -> RawTable:
        """Build from column-major cells where entry 0 of each column is its header."""
        return cls(columns=[
            RawColumn(name=col[0], cells=list(col[1:]))
            for col in columns if len(col) > 0
        ])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> RawTable:
        """Build from row-major cells where row 0 holds the headers."""
        if not rows:
            return cls()
        headers = rows[0]
        return cls(columns=[
            RawColumn(name=header, cells=[row[i] if i < len(row) else "" for row in rows[1:]])
            for i, header in enumerate(headers)
        ])

    @property
    def row_count(self) -> int:
        return max((len(c.cells) for c in self.columns), default=0)

# src/finfiles/domain/entities/fact_table.py
# Copyright (c) Finfiles.
# SPDX-License-Identifier: MIT
"""Quarterly fact table.

Purpose:
    The in-memory tabular model produced by fact normalization and consumed
    by query analysis: one row per reporting period, a leading ``quarter``
    column of period labels and one float column per ``metric_unit`` key.

Layer:
    domain

Design:
    - Backed by a pandas ``DataFrame`` so columns keep their dtypes.
    - Immutable by convention: the table copies the frame it is given and
      every accessor hands out copies, so callers can share one instance
      read-only between the presentation layer and analysis backends.
    - Columns other than ``quarter`` may have any dtype when the table is
      built by callers directly; the analyzer decides what it can use.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Final

import pandas as pd

from finfiles.domain.exceptions.analysis import InvalidTable, MissingColumn

#: Name of the period-label column. Always first when present.
QUARTER_COLUMN: Final[str] = "quarter"


@dataclass(frozen=True, eq=False)
class FactTable:
    """Immutable wrapper around a period-indexed ``DataFrame``.

    Args:
        frame: Source frame. It is copied on construction.

    Raises:
        InvalidTable: If column names repeat or ``quarter`` is present but
            not the first column.
    """

    frame: pd.DataFrame

    def __post_init__(self) -> None:
        """Validate shape invariants and take ownership of a private copy."""
        columns = [str(c) for c in self.frame.columns]
        if len(set(columns)) != len(columns):
            raise InvalidTable(
                "Fact table column names must be unique.",
                details={"columns": columns},
            )
        if QUARTER_COLUMN in columns and columns[0] != QUARTER_COLUMN:
            raise InvalidTable(
                "The quarter column must be the first column.",
                details={"columns": columns},
            )
        object.__setattr__(self, "frame", self.frame.copy(deep=True))

    @classmethod
    def from_columns(
        cls,
        quarters: Sequence[str],
        metrics: Mapping[str, Sequence[float]],
    ) -> FactTable:
        """Build a table from period labels and per-metric float columns.

        Args:
            quarters: Period labels in row order.
            metrics: Metric columns in column order; each must have one value
                per period.

        Raises:
            InvalidTable: If a metric column length differs from the number
                of periods or a metric is named ``quarter``.
        """
        data: dict[str, pd.Series] = {
            QUARTER_COLUMN: pd.Series(list(quarters), dtype=object),
        }
        for name, values in metrics.items():
            if name == QUARTER_COLUMN:
                raise InvalidTable("A metric column cannot be named 'quarter'.")
            if len(values) != len(quarters):
                raise InvalidTable(
                    "Metric column length does not match the number of periods.",
                    details={
                        "column": name,
                        "length": len(values),
                        "periods": len(quarters),
                    },
                )
            data[name] = pd.Series(list(values), dtype="float64")
        return cls(pd.DataFrame(data))

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    @property
    def columns(self) -> tuple[str, ...]:
        """All column names in table order."""
        return tuple(str(c) for c in self.frame.columns)

    @property
    def metric_names(self) -> tuple[str, ...]:
        """Column names other than ``quarter``, in table order."""
        return tuple(c for c in self.columns if c != QUARTER_COLUMN)

    @property
    def period_count(self) -> int:
        """Number of rows (reporting periods)."""
        return len(self.frame.index)

    def has_column(self, name: str) -> bool:
        """Return True if the table has a column called ``name``."""
        return name in self.columns

    def column(self, name: str) -> pd.Series:
        """Return a copy of one column.

        Raises:
            MissingColumn: If the column does not exist.
        """
        if not self.has_column(name):
            raise MissingColumn(
                f"Column '{name}' is not present in the data.",
                details={"column": name, "available": list(self.columns)},
            )
        return self.frame[name].copy()

    @property
    def quarters(self) -> tuple[str, ...]:
        """Period labels in row order.

        Raises:
            MissingColumn: If the table has no ``quarter`` column.
        """
        return tuple(str(q) for q in self.column(QUARTER_COLUMN).dropna())

    def to_frame(self) -> pd.DataFrame:
        """Return a deep copy of the underlying frame."""
        return self.frame.copy(deep=True)

    def render(self) -> str:
        """Render the table as plain text."""
        return self.frame.to_string(index=False)

    def __len__(self) -> int:
        return self.period_count

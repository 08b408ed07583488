"""Application export – ExportRequest and ColumnDef."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

__all__ = ["ColumnDef", "ExportFormat", "ExportRequest"]

ExportFormat = Literal["csv", "json", "xlsx"]


@dataclass(frozen=True)
class ColumnDef:
    """A single exported column."""

    key: str      # field key, dotted paths allowed
    header: str   # column header text


@dataclass(frozen=True)
class ExportRequest:
    """Which columns to write, and how."""

    columns: tuple[ColumnDef, ...]
    format: ExportFormat = "csv"
    filename: str = "export"
    bom: bool = False  # CSV only: prepend a UTF-8 BOM for Excel

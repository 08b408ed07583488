"""Application export – ViewExporter.

Exports what a view currently shows *across all pages*: the searched,
filtered and sorted record set, not only the visible page.
"""
from __future__ import annotations

import csv
import io
import json
from typing import Any, Sequence

from tableview.application.export.request import ExportRequest
from tableview.application.view import ViewPipeline, ViewState
from tableview.kernel.types import ValueKind, classify, to_text
from tableview.observability.logging import get_logger

__all__ = ["ViewExporter"]

_log = get_logger(__name__)


def _require_openpyxl() -> Any:
    try:
        import openpyxl  # noqa: PLC0415
        return openpyxl
    except ImportError as exc:
        raise ImportError(
            "openpyxl is required for Excel export. "
            "Install it with: pip install 'tableview[excel]'"
        ) from exc


def _excel_value(value: Any) -> Any:
    # openpyxl only takes scalars, and no timezone-aware datetimes
    kind = classify(value)
    if kind is ValueKind.NULL:
        return None
    if kind in (ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING):
        return value
    if kind is ValueKind.DATE and not getattr(value, "tzinfo", None):
        return value
    return to_text(value)


class ViewExporter:
    """Dispatches an :class:`ExportRequest` to the matching writer."""

    def __init__(self, pipeline: ViewPipeline | None = None) -> None:
        self._pipeline = pipeline or ViewPipeline()

    def export(self, records: Sequence[Any], state: ViewState, request: ExportRequest) -> bytes:
        rows = self._pipeline.arrange(records, state)
        if request.format == "csv":
            result = self._to_csv(rows, request)
        elif request.format == "json":
            result = self._to_json(rows, request)
        elif request.format == "xlsx":
            result = self._to_xlsx(rows, request)
        else:
            raise ValueError(f"Unsupported export format: {request.format!r}")
        _log.info(
            "view.exported",
            format=request.format,
            filename=request.filename,
            row_count=len(rows),
            active_filters=state.filters.active_count,
        )
        return result

    def _cells(self, row: Any, request: ExportRequest) -> list[Any]:
        return [self._pipeline.accessor.get(row, col.key) for col in request.columns]

    def _to_csv(self, rows: list[Any], request: ExportRequest) -> bytes:
        buf = io.StringIO()
        if request.bom:
            buf.write("\ufeff")
        writer = csv.writer(buf)
        writer.writerow([col.header for col in request.columns])
        for row in rows:
            writer.writerow([to_text(v) for v in self._cells(row, request)])
        return buf.getvalue().encode("utf-8")

    def _to_json(self, rows: list[Any], request: ExportRequest) -> bytes:
        payload = [
            {col.key: value for col, value in zip(request.columns, self._cells(row, request))}
            for row in rows
        ]
        return json.dumps(payload, default=str, ensure_ascii=False).encode("utf-8")

    def _to_xlsx(self, rows: list[Any], request: ExportRequest) -> bytes:
        openpyxl = _require_openpyxl()
        from openpyxl.styles import Font  # noqa: PLC0415

        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = request.filename[:31]  # sheet name limit
        for col_idx, col in enumerate(request.columns, start=1):
            ws.cell(row=1, column=col_idx, value=col.header).font = Font(bold=True)
        for row_idx, row in enumerate(rows, start=2):
            for col_idx, value in enumerate(self._cells(row, request), start=1):
                ws.cell(row=row_idx, column=col_idx, value=_excel_value(value))
        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()

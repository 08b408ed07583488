"""Unit tests for ViewExporter."""

from __future__ import annotations

import datetime
import io
import json

import pytest
from structlog.testing import capture_logs

from tableview.application.export import ColumnDef, ExportRequest, ViewExporter
from tableview.application.filtering import FilterState
from tableview.application.pagination import PageRequest
from tableview.application.sorting import SortDirective
from tableview.application.view import ViewState


def _rows() -> list[dict]:
    return [
        {"id": 1, "name": "Zeynep", "status": "active", "score": 4.0,
         "joined": datetime.date(2024, 5, 1), "tags": ["a", "b"], "meta": {"team": "core"}},
        {"id": 2, "name": "Ahmet", "status": "inactive", "score": None,
         "joined": None, "tags": [], "meta": {}},
        {"id": 3, "name": "Ayşe", "status": "active", "score": 2.5,
         "joined": datetime.date(2024, 1, 2), "tags": ["c"], "meta": {"team": "ops"}},
    ]


_COLUMNS = (
    ColumnDef("name", "Name"),
    ColumnDef("score", "Score"),
    ColumnDef("joined", "Joined"),
    ColumnDef("tags", "Tags"),
    ColumnDef("meta.team", "Team"),
)


class TestCsvExport:
    def test_header_and_rows(self) -> None:
        data = ViewExporter().export(_rows(), ViewState(), ExportRequest(_COLUMNS))
        lines = data.decode("utf-8").splitlines()
        assert lines[0] == "Name,Score,Joined,Tags,Team"
        assert lines[1] == 'Zeynep,4,2024-05-01,"a,b",core'
        assert lines[2] == "Ahmet,,,,"
        assert lines[3] == "Ayşe,2.5,2024-01-02,c,ops"

    def test_exports_every_page_of_the_view(self) -> None:
        state = ViewState(
            filters=FilterState.from_values({"status": "active"}),
            sort=SortDirective("name"),
            page=PageRequest(index=1, size=1),
        )
        data = ViewExporter().export(_rows(), state, ExportRequest((ColumnDef("name", "Name"),)))
        assert data.decode("utf-8").splitlines() == ["Name", "Ayşe", "Zeynep"]

    def test_bom(self) -> None:
        request = ExportRequest((ColumnDef("id", "ID"),), bom=True)
        data = ViewExporter().export(_rows(), ViewState(), request)
        assert data.startswith(b"\xef\xbb\xbfID")

    def test_no_bom_by_default(self) -> None:
        data = ViewExporter().export(_rows(), ViewState(), ExportRequest((ColumnDef("id", "ID"),)))
        assert data.startswith(b"ID")

    def test_empty_view_writes_header_only(self) -> None:
        data = ViewExporter().export([], ViewState(), ExportRequest(_COLUMNS))
        assert data.decode("utf-8").splitlines() == ["Name,Score,Joined,Tags,Team"]


class TestJsonExport:
    def test_keys_are_column_keys(self) -> None:
        request = ExportRequest(_COLUMNS, format="json")
        payload = json.loads(ViewExporter().export(_rows(), ViewState(), request))
        assert payload[0] == {
            "name": "Zeynep",
            "score": 4.0,
            "joined": "2024-05-01",
            "tags": ["a", "b"],
            "meta.team": "core",
        }
        assert payload[1]["score"] is None
        assert len(payload) == 3

    def test_respects_search(self) -> None:
        request = ExportRequest((ColumnDef("id", "ID"),), format="json")
        payload = json.loads(ViewExporter().export(_rows(), ViewState(search_text="ops"), request))
        assert payload == [{"id": 3}]


class TestXlsxExport:
    def test_writes_bold_header_and_cells(self) -> None:
        openpyxl = pytest.importorskip("openpyxl")
        request = ExportRequest(_COLUMNS, format="xlsx", filename="people")
        data = ViewExporter().export(_rows(), ViewState(), request)
        ws = openpyxl.load_workbook(io.BytesIO(data)).active
        assert ws.title == "people"
        assert [c.value for c in ws[1]] == ["Name", "Score", "Joined", "Tags", "Team"]
        assert ws["A1"].font.bold
        assert ws["A2"].value == "Zeynep"
        assert ws["D2"].value == "a,b"
        assert ws.max_row == 4

    def test_non_scalar_cells_are_written_as_text(self) -> None:
        openpyxl = pytest.importorskip("openpyxl")
        rows = [
            {
                "meta": {"team": "core"},
                "flags": {"x"},
                "when": datetime.datetime(2024, 1, 2, tzinfo=datetime.timezone.utc),
            }
        ]
        request = ExportRequest(
            (ColumnDef("meta", "Meta"), ColumnDef("flags", "Flags"), ColumnDef("when", "When")),
            format="xlsx",
        )
        ws = openpyxl.load_workbook(io.BytesIO(ViewExporter().export(rows, ViewState(), request))).active
        assert ws["A2"].value == "{'team': 'core'}"
        assert ws["B2"].value == "{'x'}"
        assert ws["C2"].value == "2024-01-02T00:00:00+00:00"


class TestExportErrors:
    def test_unknown_format_raises(self) -> None:
        request = ExportRequest(_COLUMNS, format="pdf")  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="pdf"):
            ViewExporter().export(_rows(), ViewState(), request)

    def test_logs_export(self) -> None:
        with capture_logs() as logs:
            ViewExporter().export(_rows(), ViewState(), ExportRequest(_COLUMNS))
        exported = [e for e in logs if e["event"] == "view.exported"]
        assert exported[0]["row_count"] == 3
        assert exported[0]["log_level"] == "info"

"""Application export – write the arranged view out as CSV, JSON or Excel."""
from tableview.application.export.request import ColumnDef, ExportFormat, ExportRequest
from tableview.application.export.exporter import ViewExporter

__all__ = ["ColumnDef", "ExportFormat", "ExportRequest", "ViewExporter"]

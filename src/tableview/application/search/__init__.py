"""Application search – free-text search stage."""
from tableview.application.search.stage import SearchStage, text_contains

__all__ = ["SearchStage", "text_contains"]

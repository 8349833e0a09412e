"""Application export – summary data to delimited-text export."""
from datasource_picker.application.export.csv_document import CsvDocumentWriter, DelimitedDocument
from datasource_picker.application.export.export_service import ExportService
from datasource_picker.application.export.records import ExportRecord, normalize_cell, to_records
from datasource_picker.application.export.result_set import Cell, Column, ResultSet

__all__ = [
    "Cell",
    "Column",
    "CsvDocumentWriter",
    "DelimitedDocument",
    "ExportRecord",
    "ExportService",
    "ResultSet",
    "normalize_cell",
    "to_records",
]

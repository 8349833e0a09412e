"""Application export – ExportService turns summary data into a delivered CSV."""
from __future__ import annotations

from datasource_picker.application.export.csv_document import CsvDocumentWriter, DelimitedDocument
from datasource_picker.application.export.records import ExportRecord, to_records
from datasource_picker.application.export.result_set import ResultSet
from datasource_picker.application.files import FileDelivery
from datasource_picker.config.settings import PickerSettings
from datasource_picker.kernel.errors import DeliveryError, EmptyResultError
from datasource_picker.observability.logging import get_logger

__all__ = ["ExportService"]

_log = get_logger(__name__)


class ExportService:
    """Converts a :class:`ResultSet` into a :class:`DelimitedDocument` and
    hands it to a :class:`FileDelivery`.
    """

    def __init__(self, settings: PickerSettings | None = None) -> None:
        self._settings = settings or PickerSettings()
        self._writer = CsvDocumentWriter(
            self._settings.delimiter,
            quote_fields=self._settings.quote_fields,
            content_type=self._settings.content_type,
        )

    @property
    def settings(self) -> PickerSettings:
        return self._settings

    def to_records(self, result_set: ResultSet) -> list[ExportRecord]:
        return to_records(
            result_set,
            strip_thousands_separator=self._settings.strip_thousands_separator,
        )

    def to_document(
        self,
        records: list[ExportRecord],
        columns: list[str],
    ) -> DelimitedDocument:
        return self._writer.write(records, columns)

    def build(self, sheet_name: str, result_set: ResultSet) -> DelimitedDocument:
        """Full conversion; header-only output for an empty result unless
        ``allow_empty_export`` is off.
        """
        if result_set.is_empty and not self._settings.allow_empty_export:
            raise EmptyResultError(sheet_name)
        records = self.to_records(result_set)
        document = self.to_document(records, result_set.column_names)
        _log.debug(
            "export.document_built",
            sheet=sheet_name,
            rows=len(records),
            columns=len(result_set.columns),
        )
        return document

    def file_name(self, suggested_name: str) -> str:
        """Strip the eligibility marker and append the export extension."""
        stem = suggested_name.replace(self._settings.eligibility_marker, "")
        return f"{stem}{self._settings.file_extension}"

    async def deliver(
        self,
        document: DelimitedDocument,
        suggested_name: str,
        delivery: FileDelivery,
    ) -> str:
        """Deliver *document*; return the file name used."""
        filename = self.file_name(suggested_name)
        try:
            await delivery.deliver(
                document.to_bytes(bom=self._settings.bom),
                document.content_type,
                filename,
            )
        except DeliveryError:
            raise
        except Exception as exc:
            raise DeliveryError(filename, cause=exc) from exc
        _log.info("export.delivered", filename=filename, bytes=len(document.text))
        return filename

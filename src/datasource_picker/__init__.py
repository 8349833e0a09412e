"""
datasource_picker – data-source selection and summary-data export for
dashboard configuration popups.

Import path convention::

    from datasource_picker.kernel.errors import UnknownSelectionError
    from datasource_picker.application.selection import SelectionReconciler
    from datasource_picker.application.export import CsvDocumentWriter
    from datasource_picker.application.session import PopupSession
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

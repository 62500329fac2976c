"""Export adapters (CSV, Excel)."""

from bluevelvet.infrastructure.export.category_csv_exporter import (
    CSV_HEADER,
    CategoryCsvExporter,
)
from bluevelvet.infrastructure.export.category_excel_exporter import (
    CategoryExcelExporter,
)

__all__ = ["CSV_HEADER", "CategoryCsvExporter", "CategoryExcelExporter"]

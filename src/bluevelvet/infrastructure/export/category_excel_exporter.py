"""Excel export of categories - infrastructure adapter for xlsx export."""

from datetime import datetime
from io import BytesIO
from typing import Iterable, Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from bluevelvet.application.dtos.catalog import CategoryDTO
from bluevelvet.infrastructure.export.category_csv_exporter import (
    CSV_HEADER,
    export_filename,
)


class ExcelStyles:
    """Style definitions for the category sheet."""

    HEADER_BG = "1E3A5F"
    HEADER_FG = "FFFFFF"
    INACTIVE_FG = "9CA3AF"

    HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=HEADER_FG)
    BODY_FONT = Font(name="Calibri", size=10)
    INACTIVE_FONT = Font(name="Calibri", size=10, color=INACTIVE_FG)

    HEADER_FILL = PatternFill(
        start_color=HEADER_BG,
        end_color=HEADER_BG,
        fill_type="solid",
    )

    LEFT = Alignment(horizontal="left", vertical="center")


class CategoryExcelExporter:
    """Generates a one-sheet workbook with the same columns as the CSV export."""

    media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    COLUMN_WIDTHS = (38, 30, 12, 30)

    def __init__(self):
        self._styles = ExcelStyles()

    def generate(self, categories: Iterable[CategoryDTO]) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = "Categories"

        ws.append(list(CSV_HEADER))
        for cell in ws[1]:
            cell.font = self._styles.HEADER_FONT
            cell.fill = self._styles.HEADER_FILL
            cell.alignment = self._styles.LEFT

        for category in categories:
            ws.append(
                [
                    str(category.id),
                    category.name,
                    category.status,
                    category.parent_name or "",
                ],
            )
            font = (
                self._styles.BODY_FONT
                if category.enabled
                else self._styles.INACTIVE_FONT
            )
            for cell in ws[ws.max_row]:
                cell.font = font

        for idx, width in enumerate(self.COLUMN_WIDTHS, start=1):
            ws.column_dimensions[get_column_letter(idx)].width = width
        ws.freeze_panes = "A2"

        output = BytesIO()
        wb.save(output)
        output.seek(0)
        return output.getvalue()

    def filename(self, now: Optional[datetime] = None) -> str:
        return export_filename("xlsx", now)

"""CSV export of categories."""

import csv
import io
from datetime import datetime
from typing import Iterable, Optional

from bluevelvet.application.dtos.catalog import CategoryDTO
from bluevelvet.domain.shared.time import utc_now

CSV_HEADER = ("ID", "Name", "Status", "Parent Category")


def export_filename(extension: str, now: Optional[datetime] = None) -> str:
    """Build ``categories_<YYYY-MM-DD-HH-MM-SS>.<extension>``."""
    timestamp = (now or utc_now()).strftime("%Y-%m-%d-%H-%M-%S")
    return f"categories_{timestamp}.{extension}"


class CategoryCsvExporter:
    """Turns exported category projections into CSV text."""

    media_type = "text/csv"

    def rows(self, categories: Iterable[CategoryDTO]) -> list[tuple[str, ...]]:
        return [
            (str(c.id), c.name, c.status, c.parent_name or "") for c in categories
        ]

    def generate(self, categories: Iterable[CategoryDTO]) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(self.rows(categories))
        return output.getvalue()

    def filename(self, now: Optional[datetime] = None) -> str:
        return export_filename("csv", now)

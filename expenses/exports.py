"""
Monthly cost report exports (CSV and Excel).

Layout: one header row, then one row per animal with the columns
tag, name, breed, entry date, current weight, pen, the five category
subtotals and the total. CSV fields are quoted by the csv module, so
commas inside names or pen labels cannot shift columns.
"""

import csv
import io
from typing import Any, Dict, Iterable, List

from django.conf import settings
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from .models import CostCategory

REPORT_HEADERS = [
    'Tag', 'Name', 'Breed', 'Entry Date', 'Current Weight', 'Pen',
    'Food', 'Service', 'Pen Cost', 'Veterinary', 'Other', 'Total',
]


def report_table(rows: Iterable[Dict[str, Any]]) -> List[List[Any]]:
    """Header plus one list per report row, values in column order."""
    date_format = settings.REPORT_DATE_FORMAT
    table = [list(REPORT_HEADERS)]
    for row in rows:
        entry_date = row['entry_date']
        table.append([
            row['tag'],
            row['animal_name'],
            row['breed'],
            entry_date.strftime(date_format) if entry_date else '',
            row['current_weight'],
            row['pen_name'],
            *[row[category] for category in CostCategory.values],
            row['total_cost'],
        ])
    return table


def write_report_csv(stream, rows: Iterable[Dict[str, Any]]) -> None:
    """Write the report as CSV to any file-like object (HttpResponse included)."""
    writer = csv.writer(stream)
    writer.writerows(report_table(rows))


def build_report_workbook(rows: Iterable[Dict[str, Any]], month: str) -> bytes:
    """Render the report as an .xlsx workbook and return its bytes."""
    wb = Workbook()
    ws = wb.active
    ws.title = f"Costs {month}"

    header_font = Font(bold=True, color='FFFFFF')
    header_fill = PatternFill(start_color='2E7D32', end_color='2E7D32', fill_type='solid')
    thin_border = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )

    table = report_table(rows)
    for row_index, values in enumerate(table, start=1):
        for col_index, value in enumerate(values, start=1):
            cell = ws.cell(row=row_index, column=col_index, value=value)
            cell.border = thin_border
            if row_index == 1:
                cell.font = header_font
                cell.fill = header_fill
                cell.alignment = Alignment(horizontal='center')
            elif col_index >= 5:
                cell.number_format = '#,##0.00'

    for col_index, header in enumerate(REPORT_HEADERS, start=1):
        ws.column_dimensions[get_column_letter(col_index)].width = max(len(header) + 4, 14)

    output = io.BytesIO()
    wb.save(output)
    return output.getvalue()

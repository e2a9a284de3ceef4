import csv
import datetime
import json
from pathlib import Path
from typing import Optional, Sequence, Tuple

import openpyxl
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from dlstats.utils import logger

HEADERS = ["Rank", "Number", "Count"]

# ============================================================
# Ranked table export
# ============================================================
class StatsExporter:
    """Writes a ranked frequency table to CSV, JSON or Excel"""

    SUPPORTED = ('.csv', '.json', '.xlsx')

    @staticmethod
    def export(ranked: Sequence[Tuple[int, int]], filepath,
               start_date: Optional[datetime.date] = None,
               end_date: Optional[datetime.date] = None) -> bool:
        """Pick the writer from the file extension"""
        path = Path(filepath)
        suffix = path.suffix.lower()
        if suffix == '.csv':
            return StatsExporter.export_to_csv(ranked, path)
        if suffix == '.json':
            return StatsExporter.export_to_json(ranked, path, start_date, end_date)
        if suffix == '.xlsx':
            return StatsExporter.export_to_excel(ranked, path)
        raise ValueError(f"Unsupported export format '{suffix}', expected one of {', '.join(StatsExporter.SUPPORTED)}")

    @staticmethod
    def export_to_csv(ranked: Sequence[Tuple[int, int]], filepath: Path) -> bool:
        try:
            with open(filepath, 'w', encoding='utf-8', newline='') as f:
                writer = csv.writer(f)
                writer.writerow(HEADERS)
                for rank, (number, count) in enumerate(ranked, 1):
                    writer.writerow([rank, number, count])
            logger.info(f"Exported {len(ranked)} numbers to {filepath}")
            return True
        except OSError as e:
            logger.error(f"Failed to export CSV: {e}")
            return False

    @staticmethod
    def export_to_json(ranked: Sequence[Tuple[int, int]], filepath: Path,
                       start_date: Optional[datetime.date] = None,
                       end_date: Optional[datetime.date] = None) -> bool:
        data = {
            'start_date': start_date.isoformat() if start_date else None,
            'end_date': end_date.isoformat() if end_date else None,
            'numbers': [
                {'rank': rank, 'number': number, 'count': count}
                for rank, (number, count) in enumerate(ranked, 1)
            ],
        }
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            logger.info(f"Exported {len(ranked)} numbers to {filepath}")
            return True
        except OSError as e:
            logger.error(f"Failed to export JSON: {e}")
            return False

    @staticmethod
    def export_to_excel(ranked: Sequence[Tuple[int, int]], filepath: Path) -> bool:
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Frequency"

        header_font = Font(bold=True, color="FFFFFF", size=11)
        header_fill = PatternFill(start_color="3366FF", end_color="3366FF", fill_type="solid")
        center = Alignment(horizontal="center", vertical="center")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        for col, header in enumerate(HEADERS, 1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = center
            cell.border = thin_border

        for row_idx, (number, count) in enumerate(ranked, 2):
            for col_idx, value in enumerate((row_idx - 1, number, count), 1):
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.alignment = center
                cell.border = thin_border

        for i, width in enumerate([8, 10, 10], 1):
            ws.column_dimensions[get_column_letter(i)].width = width

        ws.freeze_panes = 'A2'

        try:
            wb.save(filepath)
            logger.info(f"Exported {len(ranked)} numbers to {filepath}")
            return True
        except OSError as e:
            logger.error(f"Failed to export Excel: {e}")
            return False

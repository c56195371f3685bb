"""Write numbered crossword clues to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Font

from models import ClueEntry, NumberedClue


def write_clues_xlsx(
    across: list[NumberedClue],
    down: list[NumberedClue],
    output_path: str,
    disconnected: list[ClueEntry] | None = None,
) -> None:
    """Write across and down clues to an Excel workbook.

    Numbering is embedded in the clue cell: '1. Clue text'.
    Answers are in column B, the start cell as 'row,col' in column C.
    If *disconnected* is provided, a second sheet lists words that were
    parked away from the main grid because they crossed nothing.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    header_font = Font(bold=True, size=12)
    row = 1

    for label, clues in (("ACROSS", across), ("DOWN", down)):
        ws.cell(row=row, column=1, value=label).font = header_font
        row += 1
        for clue in clues:
            start_r, start_c = clue.cells[0] if clue.cells else ("", "")
            ws.cell(row=row, column=1, value=f"{clue.number}. {clue.clue_text}")
            ws.cell(row=row, column=2, value=clue.answer)
            ws.cell(row=row, column=3, value=f"{start_r},{start_c}")
            row += 1
        # Blank separator
        row += 1

    ws.column_dimensions["A"].width = 60
    ws.column_dimensions["B"].width = 15
    ws.column_dimensions["C"].width = 10

    if disconnected:
        ws2 = wb.create_sheet(title="Disconnected")
        ws2.cell(row=1, column=1, value="Clue").font = header_font
        ws2.cell(row=1, column=2, value="Answer").font = header_font
        for i, clue in enumerate(disconnected, start=2):
            ws2.cell(row=i, column=1, value=clue.clue_text)
            ws2.cell(row=i, column=2, value=clue.answer)
        ws2.column_dimensions["A"].width = 60
        ws2.column_dimensions["B"].width = 15

    wb.save(output_path)

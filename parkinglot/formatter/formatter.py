from typing import List

from parkinglot.slot.slot import Slot

STATUS_HEADER = ('Slot No.', '|Plate Number', '|Colour')


def align_rows(rows: List[tuple], min_width: int = 10, padding: int = 1) -> List[str]:
    """Pad every column but the last to a common width.

    A column is max(min_width, widest cell + padding) wide, trailing cells
    are left as they are.
    """
    if not rows:
        return []

    n_columns = max(len(row) for row in rows)
    widths = []
    for column in range(n_columns - 1):
        widest = max(len(row[column]) for row in rows if len(row) > column + 1)
        widths.append(max(min_width, widest + padding))

    lines = []
    for row in rows:
        cells = [cell.ljust(widths[i]) for i, cell in enumerate(row[:-1])]
        cells.append(row[-1])
        lines.append(''.join(cells))
    return lines


def status_table(slots: List[Slot], min_width: int = 10, padding: int = 1) -> List[str]:
    rows = [STATUS_HEADER]
    for slot in slots:
        rows.append((str(slot.index), '|' + slot.plate_number, '|' + slot.colour))
    return align_rows(rows, min_width, padding)

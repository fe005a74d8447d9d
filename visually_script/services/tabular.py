import math
import re
from typing import List, Sequence, Tuple, Union

Cell = Union[int, float, str]

# Plain ASCII decimals only: no "_" separators, no Unicode digits, no nan/inf
INTEGER_REGEX = re.compile(r'[+-]?\d+', re.ASCII)
FLOAT_REGEX = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


def coerce_cell(raw: str) -> Cell:
    """Returns the trimmed cell as int or float when it is a plain decimal number, else as string."""
    cell = raw.strip()
    if INTEGER_REGEX.fullmatch(cell):
        return int(cell)
    if FLOAT_REGEX.fullmatch(cell):
        number = float(cell)
        if math.isfinite(number):
            return number
    return cell


def parse_csv_content(content: str) -> Tuple[List[str], List[List[Cell]]]:
    """
    Splits raw CSV text into headers and rows.
    Blank lines are skipped; the first remaining line is the header line.
    """
    lines = [line for line in content.split('\n') if line.strip()]
    if not lines:
        return [], []

    headers = [cell.strip() for cell in lines[0].split(',')]
    rows = []
    for line in lines[1:]:
        rows.append([coerce_cell(cell) for cell in line.split(',')])

    return headers, rows


def format_cell(cell: Cell) -> str:
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell)


def render_csv_content(headers: Sequence[str], rows: Sequence[Sequence[Cell]]) -> str:
    lines = []
    if headers:
        lines.append(",".join(format_cell(h) for h in headers))
    for row in rows:
        lines.append(",".join(format_cell(cell) for cell in row))
    return "\n".join(lines)

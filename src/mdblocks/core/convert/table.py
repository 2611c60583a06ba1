"""Monospace text grids for tables the target surface cannot render natively"""

from typing import Sequence


MAX_CELL_WIDTH = 50


def _truncate_rows(
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    max_cell_width: int,
    ) -> list[list[str]]:
    """Return [header, *rows] with every cell cut to max_cell_width characters."""
    table = [[cell[:max_cell_width] for cell in header]]
    table.extend([cell[:max_cell_width] for cell in row] for row in rows)
    return table


def column_widths(table: list[list[str]]) -> list[int]:
    """Maximum cell length per column; rows shorter than the header count as empty."""
    if not table:
        return []
    widths = [0] * len(table[0])
    for row in table:
        for i, cell in enumerate(row[:len(widths)]):
            widths[i] = max(widths[i], len(cell))
    return widths


def _pad_row(row: list[str], widths: list[int]) -> list[str]:
    cells = row + [''] * (len(widths) - len(row))
    return [cell.ljust(width) for cell, width in zip(cells, widths)]


def format_simple_table(
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    max_cell_width: int = MAX_CELL_WIDTH,
    ) -> str:
    """Render a borderless grid: header, hyphen separator, then data rows.

    Cells are left-justified to their column width and joined with two
    spaces; trailing whitespace is trimmed from every line.
    """
    table = _truncate_rows(header, rows, max_cell_width)
    widths = column_widths(table)

    lines = ['  '.join(_pad_row(table[0], widths)).rstrip()]
    lines.append('  '.join('-' * w for w in widths).rstrip())
    lines.extend('  '.join(_pad_row(row, widths)).rstrip() for row in table[1:])
    return '\n'.join(lines)


def _border(widths: list[int], char: str = '-', junction: str = '+') -> str:
    return junction + junction.join(char * (w + 2) for w in widths) + junction


def _framed_row(row: list[str], widths: list[int]) -> str:
    return '|' + '|'.join(f" {cell} " for cell in _pad_row(row, widths)) + '|'


def format_ascii_table(
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    max_cell_width: int = MAX_CELL_WIDTH,
    ) -> str:
    """Render a fully bordered grid with '=' under the header and '-' between rows."""
    table = _truncate_rows(header, rows, max_cell_width)
    widths = column_widths(table)

    lines = [_border(widths), _framed_row(table[0], widths), _border(widths, '=')]
    body = table[1:]
    for i, row in enumerate(body):
        lines.append(_framed_row(row, widths))
        if i < len(body) - 1:
            lines.append(_border(widths))
    lines.append(_border(widths))
    return '\n'.join(lines)


TABLE_FORMATTERS = {
    'simple':   format_simple_table,
    'bordered': format_ascii_table,
}

"""
Table row splitting and Markdown Extra table rendering.
"""

TABLE_DELIMITERS = ("^", "|")


def split_table_row(line: str, delimiter: str) -> list[str]:
    """Split a converted table line on its leading delimiter and trim each cell."""
    return [cell.strip() for cell in line.split(delimiter)]


def render_table(rows: list[list[str]]) -> str:
    """
    Render buffered rows as an aligned Markdown Extra table.

    The first row is always the heading row and is followed by an
    underline row of dashes, one run per heading cell as long as the
    heading text. Rows may be ragged; each column is as wide as its
    widest cell.

    Args:
        rows: Table rows, each a list of trimmed cell strings.

    Returns:
        The rendered table, one newline-terminated line per row.
    """
    widths: list[int] = []
    for row in rows:
        for i, cell in enumerate(row):
            if i >= len(widths):
                widths.append(0)
            widths[i] = max(widths[i], len(cell))

    out = []
    for index, row in enumerate(rows):
        out.append(_render_row(row, widths))
        if index == 0:
            out.append(_render_row(["-" * len(cell) for cell in row], widths))
    return "".join(out)


def _render_row(cells: list[str], widths: list[int]) -> str:
    return " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)) + "\n"

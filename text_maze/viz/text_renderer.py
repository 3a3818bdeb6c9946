from typing import List, Tuple
from text_maze.core.grid import Grid

GUTTER = "    "
CELL_WIDTH = 4


def _border(columns: int) -> str:
    return GUTTER + "+-" + "--+-" * (columns - 1) + "--+"


def render_lines(grid: Grid) -> List[str]:
    columns = grid.columns
    lines = [(" " + GUTTER + "".join(f"{x + 1:>3} " for x in range(columns))).rstrip()]
    border = _border(columns)
    lines.append(border)

    for y in range(grid.rows):
        row = [f"{y + 1:>3} |"]
        for x in range(columns):
            row.append("   ")
            row.append(" " if grid.is_open(x, y, Grid.EAST) else "|")
        lines.append("".join(row))

        if y < grid.rows - 1:
            wall = [GUTTER, "+"]
            for x in range(columns):
                wall.append("   " if grid.is_open(x, y, Grid.SOUTH) else "---")
                wall.append("+")
            lines.append("".join(wall))

    lines.append(border)
    return lines


def render(grid: Grid) -> str:
    """
    Draws the grid as fixed-width ASCII.

    Column numbers head the diagram and row numbers label each content line,
    both 1-indexed. Reads the grid only; the same grid always renders to the
    same text.
    """
    return "\n".join(render_lines(grid)) + "\n"


def rendered_size(rows: int, columns: int) -> Tuple[int, int]:
    """(width, height) in characters of the rendering of a rows x columns grid."""
    return len(GUTTER) + 1 + CELL_WIDTH * columns, 2 * rows + 2


def fit_to_text(text_columns: int, text_rows: int) -> Tuple[int, int]:
    """Largest (rows, columns) whose rendering fits the text area, at least 1x1."""
    columns = (text_columns - len(GUTTER) - 1) // CELL_WIDTH
    rows = (text_rows - 2) // 2
    return max(1, rows), max(1, columns)

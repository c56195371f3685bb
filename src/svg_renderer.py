"""Render crossword grid as standalone SVG."""

from __future__ import annotations

from models import Grid


def render_svg(
    grid: Grid,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the crossword grid to an SVG file."""
    longest_side = max(grid.rows, grid.cols)
    if cell_size is None:
        cell_size = _default_cell_size(longest_side)

    number_font = _number_font_size(longest_side)
    letter_font = cell_size * 0.45
    width = cell_size * grid.cols
    height = cell_size * grid.rows

    parts: list[str] = [
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    ]

    for row in grid.cells:
        for cell in row:
            x = cell.col * cell_size
            y = cell.row * cell_size

            if cell.is_block:
                parts.append(
                    f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                    f'height="{cell_size}" fill="black"/>\n'
                )
                continue

            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="white" '
                f'stroke="black" stroke-width="0.5"/>\n'
            )
            if cell.number is not None:
                parts.append(
                    f'  <text x="{x + 1.5}" y="{y + number_font + 1}" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-weight="bold" font-size="{number_font}" '
                    f'fill="black">{cell.number}</text>\n'
                )
            if show_answers and cell.letter:
                parts.append(
                    f'  <text x="{x + cell_size * 0.55}" y="{y + cell_size * 0.58}" '
                    f'text-anchor="middle" dominant-baseline="central" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-size="{letter_font}" '
                    f'fill="black">{cell.letter}</text>\n'
                )

    parts.append(
        f'  <rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def render_puzzle_svg(grid: Grid, output_path: str) -> None:
    """Render puzzle grid (no answers) to SVG."""
    render_svg(grid, output_path, show_answers=False)


def render_answer_svg(grid: Grid, output_path: str) -> None:
    """Render answer grid (with letters) to SVG."""
    render_svg(grid, output_path, show_answers=True)


def _default_cell_size(longest_side: int) -> float:
    if longest_side <= 15:
        return 24.0
    elif longest_side <= 25:
        return 20.0
    return 14.0


def _number_font_size(longest_side: int) -> float:
    if longest_side <= 15:
        return 8.0
    elif longest_side <= 25:
        return 7.0
    return 5.5

"""Character-cell screen buffer, the surface transition masks are painted onto."""

from collections.abc import Iterable
from dataclasses import dataclass

from rich.cells import cell_len
from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment
from rich.style import Style

_CONTINUATION = ""
"""Placeholder for the second cell of a double-width character."""


@dataclass
class Cell:
    char: str
    style: Style


class ScreenBuffer:
    """Grid of `width` x `height` styled cells.

    The buffer is a rich renderable: printing it emits one line per row.
    """

    def __init__(self, width: int, height: int, style: Style | None = None) -> None:
        self._width = width
        self._height = height
        blank_style = style or Style()
        self._rows = [
            [Cell(" ", blank_style) for _ in range(width)] for _ in range(height)
        ]

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[list[Segment]],
        width: int,
        height: int,
        style: Style | None = None,
    ) -> "ScreenBuffer":
        """Build a buffer from lines of segments, cropping what does not fit."""
        buffer = cls(width, height, style)
        buffer.paste(lines, 0)
        return buffer

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def cell(self, x: int, y: int) -> Cell:
        return self._rows[y][x]

    def text(self) -> str:
        return "\n".join(
            "".join(cell.char for cell in row).rstrip() for row in self._rows
        )

    def paste(self, lines: Iterable[list[Segment]], top: int) -> None:
        """Write lines of segments starting at row `top`."""
        for y, line in enumerate(lines, start=top):
            if y >= self._height:
                break
            x = 0
            for segment in line:
                if segment.control:
                    continue
                style = segment.style or Style()
                for char in segment.text:
                    char_width = cell_len(char)
                    if char_width == 0:
                        continue
                    if x + char_width > self._width:
                        break
                    self._rows[y][x] = Cell(char, style)
                    if char_width == 2:
                        self._rows[y][x + 1] = Cell(_CONTINUATION, style)
                    x += char_width

    def set_cell(self, x: int, y: int, char: str, fg: str, bg: str) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            return
        row = self._rows[y]
        style = Style(color=fg, bgcolor=bg)
        # Overwriting half of a double-width character blanks the other half.
        if row[x].char == _CONTINUATION and x > 0:
            row[x - 1] = Cell(" ", style)
        elif cell_len(row[x].char) == 2 and x + 1 < self._width:
            row[x + 1] = Cell(" ", style)
        row[x] = Cell(char, style)

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        for y, row in enumerate(self._rows):
            for cell in row:
                if cell.char != _CONTINUATION:
                    yield Segment(cell.char, cell.style)
            if y < self._height - 1:
                yield Segment.line()

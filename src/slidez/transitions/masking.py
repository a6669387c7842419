"""Composite visibility masks onto screen buffers."""

from typing import Protocol

from ..models import VisibilityMask


class CellBuffer[C](Protocol):
    """Grid of character cells that masks can be painted onto."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def set_cell(self, x: int, y: int, char: str, fg: C, bg: C) -> None: ...


def invert_visibility_mask(mask: VisibilityMask) -> VisibilityMask:
    return tuple(tuple(not cell for cell in row) for row in mask)


def apply_visibility_mask[C](
    buffer: CellBuffer[C], mask: VisibilityMask, background: C
) -> None:
    """Paint the hidden cells of `mask` onto `buffer`.

    Visible cells are left untouched so that the content already painted shows \
    through. Only the region shared by the mask and the buffer is composited, which \
    keeps stale masks harmless when the terminal is resized during an animation.

    Args:
        buffer: Buffer to paint onto.
        mask: Mask whose `False` cells get painted.
        background: Color used both as foreground and background of hidden cells.
    """
    for y, row in enumerate(mask[: buffer.height]):
        for x, visible in enumerate(row[: buffer.width]):
            if not visible:
                buffer.set_cell(x, y, " ", background, background)

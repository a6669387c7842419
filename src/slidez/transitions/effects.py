"""Visibility mask generators for every transition effect.

Each effect is a pure function of `(progress, width, height)`. Generators never keep \
state between calls, so requesting frames past completion simply returns the terminal \
mask again.
"""

from collections.abc import Callable
from dataclasses import dataclass
from math import floor

from ..models import TransitionFrame, VisibilityMask

MaskFunction = Callable[[float, int, int], VisibilityMask]

WIPE_DURATION = 1000
TV_ON_DURATION = 2000
TV_OFF_DURATION = 1500
BLANK_FRAME_DURATION = 100


def _grid(
    width: int, height: int, visible: Callable[[int, int], bool]
) -> VisibilityMask:
    return tuple(tuple(visible(x, y) for x in range(width)) for y in range(height))


def _filled(width: int, height: int, value: bool) -> VisibilityMask:
    row = (value,) * width
    return (row,) * height


def left_wipe_mask(progress: float, width: int, height: int) -> VisibilityMask:
    visible_columns = floor(width * progress / 100)
    return _grid(width, height, lambda x, _: x < visible_columns)


def right_wipe_mask(progress: float, width: int, height: int) -> VisibilityMask:
    visible_columns = floor(width * progress / 100)
    return _grid(width, height, lambda x, _: x >= width - visible_columns)


def top_wipe_mask(progress: float, width: int, height: int) -> VisibilityMask:
    visible_rows = floor(height * progress / 100)
    return _grid(width, height, lambda _, y: y < visible_rows)


def bottom_wipe_mask(progress: float, width: int, height: int) -> VisibilityMask:
    visible_rows = floor(height * progress / 100)
    return _grid(width, height, lambda _, y: y >= height - visible_rows)


def diagonal_mask(progress: float, width: int, height: int) -> VisibilityMask:
    threshold = (width + height) * progress / 100
    return _grid(width, height, lambda x, y: x + y < threshold)


def _ellipse(
    width: int, height: int, radius_x: float, radius_y: float
) -> VisibilityMask:
    center_x = width // 2
    center_y = height // 2

    def inside(x: int, y: int) -> bool:
        dx = x - center_x
        dy = y - center_y
        return (dx * dx) / (radius_x * radius_x) + (dy * dy) / (
            radius_y * radius_y
        ) <= 1

    return _grid(width, height, inside)


def _max_radii(width: int, height: int) -> tuple[int, int]:
    center_x = width // 2
    center_y = height // 2
    return max(center_x, width - center_x), max(center_y, height - center_y)


def tv_turn_on_mask(progress: float, width: int, height: int) -> VisibilityMask:
    """Grow an ellipse from the center of the screen until it covers all of it."""
    if progress >= 100:
        return _filled(width, height, True)
    max_radius_x, max_radius_y = _max_radii(width, height)
    return _ellipse(
        width,
        height,
        max(1, max_radius_x * progress / 100),
        max(1, max_radius_y * progress / 100),
    )


def tv_turn_off_mask(progress: float, width: int, height: int) -> VisibilityMask:
    """Shrink a screen-sized ellipse down to a point, then hide everything."""
    if progress >= 100:
        return _filled(width, height, False)
    if progress <= 0:
        return _filled(width, height, True)
    max_radius_x, max_radius_y = _max_radii(width, height)
    return _ellipse(
        width,
        height,
        max(0.1, max_radius_x * (100 - progress) / 100),
        max(0.1, max_radius_y * (100 - progress) / 100),
    )


def blank_mask(progress: float, width: int, height: int) -> VisibilityMask:
    return _filled(width, height, False)


@dataclass(frozen=True)
class MaskTransition:
    """Transition backed by a mask function and a fixed duration."""

    name: str
    mask_function: MaskFunction
    duration: int
    hides: bool = False

    def get_frame(self, progress: float, width: int, height: int) -> TransitionFrame:
        return TransitionFrame(
            progress=progress, mask=self.mask_function(progress, width, height)
        )

    def get_duration(self) -> int:
        return self.duration


DIAGONAL = MaskTransition("diagonal", diagonal_mask, WIPE_DURATION)
LEFT_WIPE = MaskTransition("leftwipe", left_wipe_mask, WIPE_DURATION)
RIGHT_WIPE = MaskTransition("rightwipe", right_wipe_mask, WIPE_DURATION)
TOP_WIPE = MaskTransition("topwipe", top_wipe_mask, WIPE_DURATION)
BOTTOM_WIPE = MaskTransition("bottomwipe", bottom_wipe_mask, WIPE_DURATION)
TV_TURN_ON = MaskTransition("tvon", tv_turn_on_mask, TV_ON_DURATION)
TV_TURN_OFF = MaskTransition("tvoff", tv_turn_off_mask, TV_OFF_DURATION, hides=True)
BLANK_FRAME = MaskTransition("blank", blank_mask, BLANK_FRAME_DURATION, hides=True)

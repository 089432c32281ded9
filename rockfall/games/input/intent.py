"""
Intent normalization - merges every input source into one movement request.

Kept free of pygame so the merge rule can be tested on its own.
"""
from enum import Enum
from typing import Iterable, Optional

from models import Intent


class Direction(str, Enum):
    """A single horizontal direction reported by an input source."""
    LEFT = "left"
    RIGHT = "right"


def normalize_intent(
    held: Iterable[Direction],
    touch: Optional[Direction] = None,
) -> Intent:
    """Merge held keyboard directions and the touch direction.

    Sources are OR-ed together, so holding left on the keyboard while
    pressing right on the screen yields an intent with both flags set.
    Resolving that conflict is up to the movement step.

    Args:
        held: Directions currently held on the keyboard
        touch: Direction of the active touch/pointer press, if any

    Returns:
        Intent with move_left/move_right flags

    Examples:
        >>> normalize_intent({Direction.LEFT}).move_left
        True
        >>> normalize_intent([], Direction.RIGHT).move_right
        True
    """
    directions = set(held)
    if touch is not None:
        directions.add(touch)
    return Intent(
        move_left=Direction.LEFT in directions,
        move_right=Direction.RIGHT in directions,
    )

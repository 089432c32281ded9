"""
Shared primitive data types for the game engine.

This module provides the basic geometric types used by the platform
and the games.
"""

from pydantic import BaseModel, field_validator, ConfigDict


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle defined by position and dimensions.

    Used for hitboxes. Position is at top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=50.0)
        >>> rect.right
        150.0
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def overlaps(self, other: 'Rectangle') -> bool:
        """Check if the interiors of two rectangles overlap.

        Rectangles that only share an edge do not overlap.

        Examples:
            >>> a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
            >>> a.overlaps(Rectangle(x=5.0, y=5.0, width=10.0, height=10.0))
            True
            >>> a.overlaps(Rectangle(x=10.0, y=0.0, width=10.0, height=10.0))
            False
        """
        return (self.left < other.right and
                self.right > other.left and
                self.top < other.bottom and
                self.bottom > other.top)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"

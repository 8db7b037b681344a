from __future__ import annotations

import logging
from typing import Iterable, Union

import numpy as np
from shapely.geometry import Polygon, box as shapely_box

from ..constants.aabb import EMPTY_MAX, EMPTY_MIN

logger = logging.getLogger(__name__)


class Aabb:
    """Axis-aligned bounding box, i.e. the closed rectangle
    [min_x, max_x] x [min_y, max_y].

    An empty box has its bounds inverted (+inf for minimums, -inf for
    maximums), so that adding any point sets the bounds directly.
    No validation is done on the given values.

    Parameters
    ----------
    min_x : float
        Minimum x coordinate of the box.
    max_x : float
        Maximum x coordinate of the box.
    min_y : float
        Minimum y coordinate of the box.
    max_y : float
        Maximum y coordinate of the box.
    """

    def __init__(
        self,
        min_x: float = EMPTY_MIN,
        max_x: float = EMPTY_MAX,
        min_y: float = EMPTY_MIN,
        max_y: float = EMPTY_MAX,
    ):
        self.min_x = float(min_x)
        self.max_x = float(max_x)
        self.min_y = float(min_y)
        self.max_y = float(max_y)

    @classmethod
    def from_points(
        cls, points: Union[np.ndarray, Iterable[tuple[float, float]]]
    ) -> Aabb:
        """Create the smallest box containing all given points.

        Parameters
        ----------
        points : np.ndarray or iterable of (x, y)
            Points to enclose, shape (n, 2).

        Returns
        -------
        Aabb
            Box containing all points, empty if no point is given.
        """
        aabb = cls()
        aabb.add_points(points)
        return aabb

    def copy(self) -> Aabb:
        """Return an independent copy of the box."""
        return Aabb(self.min_x, self.max_x, self.min_y, self.max_y)

    def add_point(self, x: float, y: float) -> None:
        """Grow the box so that it contains (x, y).
        Has no effect if the point is already inside.

        NaN coordinates propagate: the matching bounds become NaN.

        Parameters
        ----------
        x : float
            X coordinate of the point.
        y : float
            Y coordinate of the point.
        """
        x, y = float(x), float(y)
        if np.isnan(x) or np.isnan(y):
            logger.debug("NaN coordinate added to box: (%s, %s)", x, y)
        self.min_x = float(np.minimum(x, self.min_x))
        self.min_y = float(np.minimum(y, self.min_y))
        self.max_x = float(np.maximum(x, self.max_x))
        self.max_y = float(np.maximum(y, self.max_y))

    def add_points(
        self, points: Union[np.ndarray, Iterable[tuple[float, float]]]
    ) -> None:
        """Grow the box so that it contains all given points.
        Same result as calling add_point on each of them.

        Parameters
        ----------
        points : np.ndarray or iterable of (x, y)
            Points to add, shape (n, 2).
        """
        if not isinstance(points, np.ndarray):
            points = list(points)
        points = np.asarray(points, dtype=float)
        if points.size == 0:
            return
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(
                f"Expect an array of shape (n, 2), got {points.shape}."
            )
        if np.isnan(points).any():
            logger.debug("NaN coordinates added to box.")

        # np.min/np.max propagate NaN, like np.minimum/np.maximum
        min_x, min_y = points.min(axis=0)
        max_x, max_y = points.max(axis=0)
        self.min_x = float(np.minimum(min_x, self.min_x))
        self.min_y = float(np.minimum(min_y, self.min_y))
        self.max_x = float(np.maximum(max_x, self.max_x))
        self.max_y = float(np.maximum(max_y, self.max_y))

    def has_data(self) -> bool:
        """Check if the box has been given at least one point.
        Fields are compared one by one to the empty values."""
        return (
            self.min_x != EMPTY_MIN
            and self.min_y != EMPTY_MIN
            and self.max_x != EMPTY_MAX
            and self.max_y != EMPTY_MAX
        )

    def is_empty(self) -> bool:
        """Check if the box is empty."""
        return not self.has_data()

    def get_width(self) -> float:
        """Width (change in x) of the box, NaN if the box is empty.
        A box made of a single point has a width of 0."""
        if not self.has_data():
            return np.nan
        return self.max_x - self.min_x

    def get_height(self) -> float:
        """Height (change in y) of the box, NaN if the box is empty."""
        if not self.has_data():
            return np.nan
        return self.max_y - self.min_y

    def get_area(self) -> float:
        """Area of the box, NaN if the box is empty."""
        if not self.has_data():
            return np.nan
        return (self.max_x - self.min_x) * (self.max_y - self.min_y)

    def get_center(self) -> np.ndarray:
        """Return center as numpy array.

        Returns
        -------
        np.ndarray
            Center (x, y) of the box, [nan, nan] if the box is empty.
        """
        if not self.has_data():
            return np.array([np.nan, np.nan])
        return np.array(
            [(self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2]
        )

    def contains_point(self, x: float, y: float) -> bool:
        """Check if (x, y) lies in the box, borders included."""
        return (
            self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y
        )

    def intersect(self, other: Aabb) -> Aabb:
        """Intersection of this box with another one, see intersect."""
        return intersect(self, other)

    def overlaps(self, other: Aabb) -> bool:
        """Check if the box overlaps with another box.
        Touching borders count as overlapping, empty boxes never overlap."""
        return intersect(self, other).has_data()

    def to_polygon(self) -> Polygon:
        """Convert the box to a shapely polygon.

        Returns
        -------
        Polygon
            Rectangle polygon, empty polygon if the box is empty.
        """
        if not self.has_data():
            return Polygon()
        return shapely_box(self.min_x, self.min_y, self.max_x, self.max_y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Aabb):
            return NotImplemented
        return (
            self.min_x == other.min_x
            and self.max_x == other.max_x
            and self.min_y == other.min_y
            and self.max_y == other.max_y
        )

    def __repr__(self) -> str:
        return (
            f"Aabb(min_x={self.min_x}, max_x={self.max_x}, "
            f"min_y={self.min_y}, max_y={self.max_y})"
        )

    def __str__(self) -> str:
        return f"x:[{self.min_x}, {self.max_x}] y:[{self.min_y}, {self.max_y}]"


def init_aabb() -> Aabb:
    """Create and return an empty box."""
    return Aabb()


def add_point(aabb: Aabb, x: float, y: float) -> None:
    """Add a point to a box, growing it if the point is outside."""
    aabb.add_point(x, y)


def has_data(aabb: Aabb) -> bool:
    """True if the box has been given at least one point."""
    return aabb.has_data()


def get_width(aabb: Aabb) -> float:
    return aabb.get_width()


def get_height(aabb: Aabb) -> float:
    return aabb.get_height()


def get_area(aabb: Aabb) -> float:
    return aabb.get_area()


def intersect(box1: Aabb, box2: Aabb) -> Aabb:
    """Compute the intersection of two boxes.

    Boxes touching on a border overlap, with a zero width or height
    intersection. Input boxes are not modified.

    Parameters
    ----------
    box1 : Aabb
        First box.
    box2 : Aabb
        Second box.

    Returns
    -------
    Aabb
        Overlapping rectangle, or a new empty box if there is none.
    """
    if (
        box1.max_x < box2.min_x
        or box2.max_x < box1.min_x
        or box1.max_y < box2.min_y
        or box2.max_y < box1.min_y
    ):
        logger.debug("No overlap between %s and %s", box1, box2)
        return init_aabb()

    return Aabb(
        min_x=np.maximum(box1.min_x, box2.min_x),
        max_x=np.minimum(box1.max_x, box2.max_x),
        min_y=np.maximum(box1.min_y, box2.min_y),
        max_y=np.minimum(box1.max_y, box2.max_y),
    )

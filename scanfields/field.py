"""Field descriptors for multi-ROI scans.

A field is a rectangular region of a scan. When a field is formed by joining two
or more contiguous subfields (see `Field.join_with`), its slice lists hold one
slice per subfield describing where that subfield is taken from the page and
where it is pasted in the (joint) output field. Attributes height, width, y, x,
height_in_degrees and width_in_degrees describe the joint field. For fields that
were never joined, each slice list holds a single slice.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional, Union

from .parameters import DEFAULT_PARAMETERS, ContiguityParameters
from .pixel_slice import PixelSlice
from .position import Position

SliceLike = Union[PixelSlice, slice, tuple[int, int]]


class NoncontiguousFieldsError(ValueError):
    """Raised when joining two fields that do not share an edge."""


class SlicePair(NamedTuple):
    """Where to read one subfield from the page and where to write it in the output."""

    page_y: slice
    page_x: slice
    output_y: slice
    output_x: slice


def _coerce_slices(slices: Optional[Iterable[SliceLike]]) -> Optional[list[PixelSlice]]:
    if slices is None:
        return None
    return [PixelSlice.coerce(s) for s in slices]


def _is_close(a: float, b: float, tolerance: float) -> bool:
    return abs(a - b) < tolerance


def _slices_or_empty(slices: Optional[list[PixelSlice]]) -> list[PixelSlice]:
    return list(slices) if slices is not None else []


def _shifted(slices: list[PixelSlice], offset: Optional[int]) -> list[PixelSlice]:
    # An unknown extent leaves the slices where they are.
    if offset is None:
        return list(slices)
    return [s + offset for s in slices]


def _sum_or_none(a: Optional[int], b: Optional[int]) -> Optional[int]:
    if a is None or b is None:
        return None
    return a + b


@dataclass
class Field:
    """Geometry of a scan field and how its subfields map from page to output."""

    height: Optional[int] = None
    """Height of the field in pixels."""
    width: Optional[int] = None
    """Width of the field in pixels."""
    depth: Optional[float] = None
    """Depth at which this field was recorded (microns relative to absolute z)."""
    y: Optional[float] = None
    """Y coordinate of the center of the field in the scan (scan angle degrees)."""
    x: Optional[float] = None
    """X coordinate of the center of the field in the scan (scan angle degrees)."""
    height_in_degrees: Optional[float] = None
    width_in_degrees: Optional[float] = None
    y_slices: Optional[list[PixelSlice]] = None
    """How to slice the page in the y axis to get each subfield.

    The constructor also accepts builtin slices or (start, stop) pairs here and
    in the other slice lists; they are converted to PixelSlice on construction.
    """
    x_slices: Optional[list[PixelSlice]] = None
    """How to slice the page in the x axis to get each subfield."""
    output_y_slices: Optional[list[PixelSlice]] = None
    """Where to paste each subfield in the output field (y axis)."""
    output_x_slices: Optional[list[PixelSlice]] = None
    """Where to paste each subfield in the output field (x axis)."""

    def __post_init__(self) -> None:
        self.y_slices = _coerce_slices(self.y_slices)
        self.x_slices = _coerce_slices(self.x_slices)
        self.output_y_slices = _coerce_slices(self.output_y_slices)
        self.output_x_slices = _coerce_slices(self.output_x_slices)

    @property
    def has_contiguous_subfields(self) -> bool:
        """Whether this field was made by joining two or more subfields."""
        return self.x_slices is not None and len(self.x_slices) > 1

    @property
    def output_shape(self) -> tuple[Optional[int], Optional[int]]:
        return (self.height, self.width)

    def copy(self) -> "Field":
        """Return a field with the same geometry and its own slice lists."""
        return Field(
            self.height,
            self.width,
            self.depth,
            self.y,
            self.x,
            self.height_in_degrees,
            self.width_in_degrees,
            self.y_slices,
            self.x_slices,
            self.output_y_slices,
            self.output_x_slices,
        )

    def __copy__(self) -> "Field":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Field":
        return self.copy()

    def slice_pairs(self) -> list[SlicePair]:
        """Page and output slices for each subfield, ready to index numpy arrays.

        Raises:
            ValueError: If the slice lists are unset or have different lengths
        """
        slice_lists = (
            self.y_slices,
            self.x_slices,
            self.output_y_slices,
            self.output_x_slices,
        )
        if any(s is None for s in slice_lists):
            raise ValueError("Field has unset slice lists")
        lengths = {len(s) for s in slice_lists}
        if len(lengths) != 1:
            raise ValueError(
                f"Field slice lists have mismatched lengths: {[len(s) for s in slice_lists]}"
            )
        return [
            SlicePair(py.as_slice(), px.as_slice(), oy.as_slice(), ox.as_slice())
            for py, px, oy, ox in zip(*slice_lists)
        ]

    def classify(
        self, other: "Field", params: Optional[ContiguityParameters] = None
    ) -> Position:
        """Compute how `other` is contiguous to this field.

        Fields are contiguous if they have the same extent on one axis and their
        centers are exactly one half-extent-sum apart on the other. Unset
        geometry never matches.

        Returns:
            Position of `other` relative to this field: ABOVE, BELOW, LEFT, RIGHT
            or NONCONTIGUOUS.
        """
        if params is None:
            params = DEFAULT_PARAMETERS
        epsilon = params.tolerance
        position = Position.NONCONTIGUOUS

        vertical = (
            self.width_in_degrees, other.width_in_degrees,
            self.height_in_degrees, other.height_in_degrees,
            self.y, other.y,
        )
        if None not in vertical and _is_close(
            self.width_in_degrees, other.width_in_degrees, epsilon
        ):
            expected_distance = self.height_in_degrees / 2 + other.height_in_degrees / 2
            if _is_close(self.y, other.y + expected_distance, epsilon):
                position = Position.ABOVE
            if _is_close(other.y, self.y + expected_distance, epsilon):
                position = Position.BELOW

        horizontal = (
            self.height_in_degrees, other.height_in_degrees,
            self.width_in_degrees, other.width_in_degrees,
            self.x, other.x,
        )
        if None not in horizontal and _is_close(
            self.height_in_degrees, other.height_in_degrees, epsilon
        ):
            expected_distance = self.width_in_degrees / 2 + other.width_in_degrees / 2
            vertical_position = position
            if _is_close(self.x, other.x + expected_distance, epsilon):
                position = Position.LEFT
            if _is_close(other.x, self.x + expected_distance, epsilon):
                position = Position.RIGHT
            if vertical_position.is_vertical and position.is_horizontal:
                logging.warning(
                    f"Field matches both {vertical_position.value} and {position.value}; "
                    f"using {position.value}"
                )

        return position

    def is_contiguous_to(
        self, other: "Field", params: Optional[ContiguityParameters] = None
    ) -> bool:
        """Whether this field shares an edge with `other`."""
        return self.classify(other, params) != Position.NONCONTIGUOUS

    def join_with(
        self, other: "Field", params: Optional[ContiguityParameters] = None
    ) -> Position:
        """Update this field to incorporate `other`. `other` is NOT changed.

        Output slices of whichever field ends up further down (or right) in the
        joint field are shifted by the height (or width) of the other one. Input
        slices are appended as they are: each subfield is still read from its
        own place in the page.

        Args:
            other: A field contiguous to this one
            params: Tolerance and strictness; module defaults if not given

        Returns:
            The position of `other` relative to this field before the join

        Raises:
            NoncontiguousFieldsError: If the fields are not contiguous and
                `params.strict_join` is set. This field is left unchanged.
        """
        if params is None:
            params = DEFAULT_PARAMETERS
        contiguity = self.classify(other, params)

        if contiguity == Position.NONCONTIGUOUS:
            if params.strict_join:
                raise NoncontiguousFieldsError(
                    f"Cannot join noncontiguous fields: {self} and {other}"
                )
            logging.warning(
                "Joining noncontiguous fields; only input slices will be appended"
            )

        y, height, height_in_degrees = self.y, self.height, self.height_in_degrees
        x, width, width_in_degrees = self.x, self.width, self.width_in_degrees
        output_y_slices = _slices_or_empty(self.output_y_slices)
        output_x_slices = _slices_or_empty(self.output_x_slices)
        other_output_y_slices = _slices_or_empty(other.output_y_slices)
        other_output_x_slices = _slices_or_empty(other.output_x_slices)

        if contiguity.is_vertical:
            if contiguity == Position.ABOVE:  # other is atop self
                y = other.y + self.height_in_degrees / 2
                output_y_slices = _shifted(output_y_slices, other.height)
            else:  # other is below self
                y = self.y + other.height_in_degrees / 2
                other_output_y_slices = _shifted(other_output_y_slices, self.height)
            height = _sum_or_none(self.height, other.height)
            height_in_degrees = self.height_in_degrees + other.height_in_degrees

        if contiguity.is_horizontal:
            if contiguity == Position.LEFT:  # other is to the left of self
                x = other.x + self.width_in_degrees / 2
                output_x_slices = _shifted(output_x_slices, other.width)
            else:  # other is to the right of self
                x = self.x + other.width_in_degrees / 2
                other_output_x_slices = _shifted(other_output_x_slices, self.width)
            width = _sum_or_none(self.width, other.width)
            width_in_degrees = self.width_in_degrees + other.width_in_degrees

        # Input slices get appended regardless of the type of contiguity
        y_slices = _slices_or_empty(self.y_slices) + _slices_or_empty(other.y_slices)
        x_slices = _slices_or_empty(self.x_slices) + _slices_or_empty(other.x_slices)

        self.y_slices = y_slices
        self.x_slices = x_slices
        if contiguity != Position.NONCONTIGUOUS:
            self.y, self.height, self.height_in_degrees = y, height, height_in_degrees
            self.x, self.width, self.width_in_degrees = x, width, width_in_degrees
            self.output_y_slices = output_y_slices + other_output_y_slices
            self.output_x_slices = output_x_slices + other_output_x_slices
            logging.debug(
                f"Joined field {contiguity.value} of this one: now {len(self.x_slices)} "
                f"subfields, {self.height}x{self.width} px"
            )
        return contiguity

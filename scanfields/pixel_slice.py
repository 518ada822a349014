"""Half-open pixel ranges used to map subfields between a page and an output field."""

import numbers
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PixelSlice:
    """A `[start, stop)` range of pixel indices with an implicit step of 1.

    Slices used by fields hold two promises: the step is always 1 (subfields are
    contiguous blocks) and `stop = start + extent`, where extent is the height or
    width of the subfield in pixels.
    """

    start: int
    stop: int

    def __post_init__(self) -> None:
        if self.stop < self.start:
            raise ValueError(
                f"Slice stop ({self.stop}) must not be smaller than start ({self.start})"
            )

    @property
    def extent(self) -> int:
        return self.stop - self.start

    def __len__(self) -> int:
        return self.extent

    def shift(self, offset: int) -> "PixelSlice":
        """Return the same range moved by `offset` pixels."""
        return PixelSlice(self.start + int(offset), self.stop + int(offset))

    def __add__(self, offset: int) -> "PixelSlice":
        if not isinstance(offset, numbers.Integral):
            return NotImplemented
        return self.shift(offset)

    __radd__ = __add__

    def as_slice(self) -> slice:
        """A builtin slice, usable to index numpy arrays."""
        return slice(self.start, self.stop)

    @classmethod
    def from_extent(cls, start: int, extent: int) -> "PixelSlice":
        return cls(start, start + extent)

    @classmethod
    def from_slice(cls, s: slice) -> "PixelSlice":
        if s.step not in (None, 1):
            raise ValueError(f"Only unit-step slices are supported, got step {s.step}")
        if s.start is None or s.stop is None:
            raise ValueError(f"Slice bounds must be explicit, got {s}")
        return cls(int(s.start), int(s.stop))

    @classmethod
    def coerce(
        cls, value: Union["PixelSlice", slice, tuple[int, int]]
    ) -> "PixelSlice":
        """Build a PixelSlice from a PixelSlice, a builtin slice or a (start, stop) pair."""
        if isinstance(value, PixelSlice):
            return value
        if isinstance(value, slice):
            return cls.from_slice(value)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            start, stop = value
            return cls(int(start), int(stop))
        raise TypeError(
            f"Cannot convert {type(value).__name__} to PixelSlice. "
            "Expected PixelSlice, slice or a (start, stop) pair."
        )

    def __repr__(self) -> str:
        return f"PixelSlice({self.start}, {self.stop})"

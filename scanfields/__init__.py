"""Scan Fields Package.

This package reconstructs the fields of view of a multi-ROI scan from the
subfields recorded by the microscope. It only does the bookkeeping, and never
touches pixel data.

Main functionality:
- Field descriptors: geometry of a field in pixels and scan angle degrees
- Contiguity classification: whether a field sits above, below, left or right of another
- Field joining: merge contiguous subfields into one field with page/output slices
"""

from .field import Field, NoncontiguousFieldsError, SlicePair
from .parameters import DEFAULT_TOLERANCE, ContiguityParameters
from .pixel_slice import PixelSlice
from .position import Position

__all__ = [
    'Field',
    'NoncontiguousFieldsError',
    'SlicePair',
    'ContiguityParameters',
    'DEFAULT_TOLERANCE',
    'PixelSlice',
    'Position',
]

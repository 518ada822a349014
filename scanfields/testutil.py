import pathlib

from .field import Field

PARAMETERS_FIXTURE_FILE = (
    pathlib.Path(__file__).parent.parent
    / "test_fixtures"
    / "parameters_test"
    / "parameters.json"
)


def make_subfield(
    height: int = 100,
    width: int = 50,
    y: float = 0.0,
    x: float = 0.0,
    height_in_degrees: float = 10.0,
    width_in_degrees: float = 5.0,
    page_y_start: int = 0,
    page_x_start: int = 0,
    depth: float = 0.0,
) -> Field:
    """Build a field for a single subfield, as read from a scan header.

    The subfield is read from the page starting at (page_y_start, page_x_start)
    and pasted at the origin of its own output field.
    """
    return Field(
        height,
        width,
        depth,
        y,
        x,
        height_in_degrees,
        width_in_degrees,
        [(page_y_start, page_y_start + height)],
        [(page_x_start, page_x_start + width)],
        [(0, height)],
        [(0, width)],
    )

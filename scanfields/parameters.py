import numpy as np
from pydantic import BaseModel, PositiveFloat

# Single precision machine epsilon, used as an absolute tolerance.
DEFAULT_TOLERANCE = float(np.finfo(np.float32).eps)


class ContiguityParameters(
    BaseModel,
    use_attribute_docstrings=True,
):
    """Parameters controlling how fields are classified and joined."""

    tolerance: PositiveFloat = DEFAULT_TOLERANCE
    """Max acceptable absolute difference between two coordinates in scan angle degrees.

    Used both to check that two fields share their extent on the orthogonal
    axis and that their centers sit exactly half an extent apart on the joining
    axis.
    """

    strict_join: bool = True
    """Whether joining two noncontiguous fields raises an error.

    If false, joining a noncontiguous field leaves the geometry untouched and
    only appends the input slices, which leaves the receiver with more input
    slices than output slices.
    """

    @classmethod
    def from_json_file(cls, json_path: str) -> "ContiguityParameters":
        """Create parameters from a JSON file.

        Args:
            json_path: Path to JSON file containing parameters

        Returns:
            ContiguityParameters: New instance with values from JSON
        """
        with open(json_path) as f:
            return cls.model_validate_json(f.read())

    def to_json_file(self, json_path: str) -> None:
        """Save parameters to a JSON file.

        Args:
            json_path: Path where JSON file should be saved
        """
        with open(json_path, "w") as f:
            f.write(self.model_dump_json(indent=2))


DEFAULT_PARAMETERS = ContiguityParameters()

from dataclasses import dataclass
from pathlib import Path
from typing import Type, Union

from polyline_cleanup.geometry import Cartesian2, Cartesian3


@dataclass
class PolylineCleaningContext:
    data_dir: Path

    input_filename: str
    output_filename: str

    dimension: int = 3
    wrap_around: bool = False

    @property
    def input_path(self) -> Path:
        return self.data_dir / self.input_filename

    @property
    def output_path(self) -> Path:
        return self.data_dir / self.output_filename

    @property
    def point_type(self) -> Union[Type[Cartesian2], Type[Cartesian3]]:
        return Cartesian2 if self.dimension == 2 else Cartesian3

    def __post_init__(self):
        """Validate paths and dimension."""
        self.data_dir = Path(self.data_dir)

        if not self.input_path.exists():
            raise FileNotFoundError(f"Polylines file does not exist at: {self.input_path}")

        if self.dimension not in (2, 3):
            raise ValueError(f"Dimension must be 2 or 3, got: {self.dimension}")

        self.output_path.parent.mkdir(parents=True, exist_ok=True)


@dataclass
class CleaningStats:
    polylines: int = 0
    points_in: int = 0
    points_out: int = 0

    @property
    def removed(self) -> int:
        return self.points_in - self.points_out

from dataclasses import dataclass
from .exceptions import InvalidArgumentError, InvalidSampleCountError

@dataclass
class CurveConfig:
    """Numeric defaults shared by the curve operations"""
    length_samples: int = 100
    distance_samples: int = 100

    intersection_tolerance: float = 0.5
    intersection_max_depth: int = 16

    def __post_init__(self):
        if self.length_samples < 2:
            raise InvalidSampleCountError(f"length_samples must be at least 2, got {self.length_samples}")
        if self.distance_samples < 2:
            raise InvalidSampleCountError(f"distance_samples must be at least 2, got {self.distance_samples}")
        if self.intersection_tolerance <= 0:
            raise InvalidArgumentError(f"intersection_tolerance must be positive, got {self.intersection_tolerance}")
        if self.intersection_max_depth < 0:
            raise InvalidArgumentError(f"intersection_max_depth must be non-negative, got {self.intersection_max_depth}")

    def replace(self, **changes) -> 'CurveConfig':
        """Copy of this config with the given fields overridden, skipping None values"""
        values = {name: value for name, value in changes.items() if value is not None}
        return CurveConfig(**{**self.__dict__, **values})


DEFAULT_CONFIG = CurveConfig()

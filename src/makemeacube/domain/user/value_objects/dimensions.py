"""Three-axis measurement value object."""

from dataclasses import dataclass

from makemeacube.domain.user.exceptions import InvalidDimensionsError


@dataclass(frozen=True)
class Dimensions:
    """Non-negative x/y/z triple, used for print volume and accuracy."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        for axis in ("x", "y", "z"):
            value = getattr(self, axis)
            if value < 0:
                raise InvalidDimensionsError(axis, value)

    def __str__(self) -> str:
        return f"{self.x}x{self.y}x{self.z}"

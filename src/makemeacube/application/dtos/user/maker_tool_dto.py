"""Input DTOs for maker tools and their materials."""

from dataclasses import dataclass, field
from typing import Optional

from makemeacube.domain.user import MaterialType, Printer3DType


@dataclass(frozen=True)
class MaterialInformationDTO:
    type: MaterialType
    colors: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Printer3DInformationDTO:
    """Full description of a 3D printer.

    ``materials`` is the complete desired material set: on update it replaces
    whatever the printer had before.
    """

    name: str
    description: str
    x: int
    y: int
    z: int
    x_accuracy: int
    y_accuracy: int
    z_accuracy: int
    layer_thickness: int
    type: Printer3DType
    materials: tuple[MaterialInformationDTO, ...] = field(default_factory=tuple)
    reference: Optional[str] = None

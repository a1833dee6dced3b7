"""Entities owned by the User aggregate."""

from makemeacube.domain.user.entities.address import Address
from makemeacube.domain.user.entities.maker_tool import MakerTool
from makemeacube.domain.user.entities.material import Material
from makemeacube.domain.user.entities.printer_3d import Printer3D

__all__ = [
    "Address",
    "MakerTool",
    "Material",
    "Printer3D",
]

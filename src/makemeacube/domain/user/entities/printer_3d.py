"""3D printer, the concrete maker tool kind."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

from makemeacube.domain.user.entities.maker_tool import MakerTool
from makemeacube.domain.user.exceptions import InvalidDimensionsError
from makemeacube.domain.user.value_objects import Dimensions, Printer3DType

if TYPE_CHECKING:
    from makemeacube.domain.user.aggregates.user import User


class Printer3D(MakerTool):
    kind: ClassVar[str] = "printer_3d"

    def __init__(  # NOQA: PLR0913
        self,
        owner: User,
        name: str,
        description: str,
        volume: Dimensions,
        accuracy: Dimensions,
        layer_thickness: int,
        printer_type: Printer3DType,
        reference: Optional[str] = None,
        id: Optional[int] = None,
    ):
        super().__init__(
            owner=owner,
            name=name,
            description=description,
            reference=reference,
            id=id,
        )
        self._volume = volume
        self._accuracy = accuracy
        self._layer_thickness = self._check_layer_thickness(layer_thickness)
        self._printer_type = Printer3DType(printer_type)

    @property
    def volume(self) -> Dimensions:
        return self._volume

    @property
    def accuracy(self) -> Dimensions:
        return self._accuracy

    @property
    def layer_thickness(self) -> int:
        return self._layer_thickness

    @property
    def printer_type(self) -> Printer3DType:
        return self._printer_type

    def respecify(
        self,
        volume: Dimensions,
        accuracy: Dimensions,
        layer_thickness: int,
        printer_type: Printer3DType,
    ) -> None:
        self._volume = volume
        self._accuracy = accuracy
        self._layer_thickness = self._check_layer_thickness(layer_thickness)
        self._printer_type = Printer3DType(printer_type)

    @staticmethod
    def _check_layer_thickness(value: int) -> int:
        if value < 0:
            raise InvalidDimensionsError("layer_thickness", value)
        return value

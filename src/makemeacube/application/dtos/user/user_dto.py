"""Output DTOs: the re-serialisable view of a User aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from makemeacube.domain.user import Address, MakerTool, Material, Printer3D, User


@dataclass(frozen=True)
class AddressDTO:
    id: Optional[int]
    address: str
    city: str
    country: str
    postal_code: str

    @classmethod
    def from_domain(cls, address: Address) -> AddressDTO:
        return cls(
            id=address.id,
            address=address.address,
            city=address.city,
            country=address.country,
            postal_code=address.postal_code,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "address": self.address,
            "city": self.city,
            "country": self.country,
            "postal_code": self.postal_code,
        }


@dataclass(frozen=True)
class MaterialDTO:
    id: Optional[int]
    type: str
    colors: Optional[str]
    description: Optional[str]

    @classmethod
    def from_domain(cls, material: Material) -> MaterialDTO:
        return cls(
            id=material.id,
            type=material.material_type.value,
            colors=material.colors,
            description=material.description,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "colors": self.colors,
            "description": self.description,
        }


@dataclass(frozen=True)
class MakerToolDTO:
    """A maker tool; ``specification`` holds the kind-specific fields."""

    id: Optional[int]
    kind: str
    name: str
    description: str
    reference: Optional[str]
    materials: tuple[MaterialDTO, ...]
    specification: dict

    @classmethod
    def from_domain(cls, tool: MakerTool) -> MakerToolDTO:
        specification: dict = {}
        if isinstance(tool, Printer3D):
            specification = {
                "x": tool.volume.x,
                "y": tool.volume.y,
                "z": tool.volume.z,
                "x_accuracy": tool.accuracy.x,
                "y_accuracy": tool.accuracy.y,
                "z_accuracy": tool.accuracy.z,
                "layer_thickness": tool.layer_thickness,
                "type": tool.printer_type.value,
            }
        return cls(
            id=tool.id,
            kind=tool.kind,
            name=tool.name,
            description=tool.description,
            reference=tool.reference,
            materials=tuple(MaterialDTO.from_domain(m) for m in tool.materials),
            specification=specification,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "kind": self.kind,
            "name": self.name,
            "description": self.description,
            "reference": self.reference,
            "materials": [m.to_dict() for m in self.materials],
            **self.specification,
        }


@dataclass(frozen=True)
class UserDTO:
    """User aggregate for presentation. Never carries the password hash."""

    id: Optional[int]
    email: str
    pseudo: str
    first_name: Optional[str]
    last_name: Optional[str]
    phone: Optional[str]
    is_maker: bool
    maker_description: Optional[str]
    registration_provider: str
    registration_status: str
    addresses: tuple[AddressDTO, ...]
    maker_tools: tuple[MakerToolDTO, ...]

    @classmethod
    def from_domain(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            email=user.email,
            pseudo=user.pseudo,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            is_maker=user.is_maker,
            maker_description=user.maker_description,
            registration_provider=user.registration_provider.value,
            registration_status=user.registration_status.value,
            addresses=tuple(AddressDTO.from_domain(a) for a in user.addresses),
            maker_tools=tuple(MakerToolDTO.from_domain(t) for t in user.maker_tools),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "pseudo": self.pseudo,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone": self.phone,
            "is_maker": self.is_maker,
            "maker_description": self.maker_description,
            "registration_provider": self.registration_provider,
            "registration_status": self.registration_status,
            "addresses": [a.to_dict() for a in self.addresses],
            "maker_tools": [t.to_dict() for t in self.maker_tools],
        }

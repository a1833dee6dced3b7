"""Apply input DTOs onto loaded aggregates.

These operations assume the caller already went through the
OwnershipValidator; they never check ownership themselves.
"""

from __future__ import annotations

from typing import Iterable

from makemeacube.application.dtos.user import (
    AddressInformationDTO,
    MaterialInformationDTO,
    Printer3DInformationDTO,
    UserUpdatedInformationDTO,
)
from makemeacube.domain.shared.time import utc_now
from makemeacube.domain.user import (
    Address,
    Dimensions,
    MakerTool,
    Material,
    Printer3D,
    User,
)


class AggregateMergeService:
    """Build new entities and merge updates into existing ones."""

    @staticmethod
    def merge_user_update(user: User, info: UserUpdatedInformationDTO) -> User:
        """Return a replacement copy of ``user`` carrying the new profile.

        Profile fields are copied verbatim from ``info`` (``None`` clears).
        Identity, email, password, provider, status and the address/tool
        collections come from ``user``; the children are re-attached to the
        copy.
        """
        return User(
            id=user.id,
            email=user.email_obj,
            pseudo=info.pseudo,
            password_hash=user.password_hash,
            registration_provider=user.registration_provider,
            first_name=info.first_name,
            last_name=info.last_name,
            phone=info.phone,
            is_maker=info.is_maker,
            maker_description=info.maker_description,
            registration_status=user.registration_status,
            addresses=user.addresses,
            maker_tools=user.maker_tools,
            created_at=user.created_at,
            updated_at=utc_now(),
        )

    @staticmethod
    def merge_address_create(user: User, info: AddressInformationDTO) -> Address:
        """New, unsaved address owned by ``user``. The caller appends it."""
        return Address(
            address=info.address,
            city=info.city,
            country=info.country,
            postal_code=info.postal_code,
            owner=user,
        )

    @staticmethod
    def merge_address_update(address: Address, info: AddressInformationDTO) -> None:
        address.relocate(
            address=info.address,
            city=info.city,
            country=info.country,
            postal_code=info.postal_code,
        )

    @classmethod
    def merge_tool_create(cls, user: User, info: Printer3DInformationDTO) -> Printer3D:
        printer = Printer3D(
            owner=user,
            name=info.name,
            description=info.description,
            reference=info.reference,
            volume=Dimensions(info.x, info.y, info.z),
            accuracy=Dimensions(info.x_accuracy, info.y_accuracy, info.z_accuracy),
            layer_thickness=info.layer_thickness,
            printer_type=info.type,
        )
        printer.replace_materials(cls.build_materials(printer, info.materials))
        return printer

    @classmethod
    def merge_tool_update(
        cls,
        printer: Printer3D,
        info: Printer3DInformationDTO,
    ) -> list[Material]:
        """Overwrite every field and replace the whole material list.

        Materials are always recreated: the returned list holds the
        materials that were dropped, none of which survive the update.
        """
        printer.describe(
            name=info.name,
            description=info.description,
            reference=info.reference,
        )
        printer.respecify(
            volume=Dimensions(info.x, info.y, info.z),
            accuracy=Dimensions(info.x_accuracy, info.y_accuracy, info.z_accuracy),
            layer_thickness=info.layer_thickness,
            printer_type=info.type,
        )
        return printer.replace_materials(
            cls.build_materials(printer, info.materials),
        )

    @staticmethod
    def build_materials(
        tool: MakerTool,
        infos: Iterable[MaterialInformationDTO],
    ) -> list[Material]:
        return [
            Material(
                material_type=info.type,
                colors=info.colors,
                description=info.description,
                owner=tool,
            )
            for info in infos
        ]

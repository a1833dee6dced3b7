"""Translation between the User aggregate and its ORM models.

Models are built and updated in place; identifiers of new rows are only
known after flush, so builders register (entity, model) pairs with an
``IdentityAssignments`` that the repository applies once flushed.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from makemeacube.domain.shared.identity import StorageIdentity
from makemeacube.domain.shared.time import as_utc
from makemeacube.domain.user import (
    Address,
    Dimensions,
    MakerTool,
    Material,
    Printer3D,
    User,
)
from makemeacube.infrastructure.persistence.sqlalchemy.models import (
    AddressModel,
    MakerToolModel,
    MaterialModel,
    Printer3DModel,
    UserModel,
)

EntityT = TypeVar("EntityT", bound=StorageIdentity)
ModelT = TypeVar("ModelT")


class IdentityAssignments:
    """Collect new entities and hand them their row id after flush."""

    def __init__(self) -> None:
        self._pending: list[tuple[StorageIdentity, object]] = []

    def track(self, entity: StorageIdentity, model: object) -> None:
        if not entity.is_persisted:
            self._pending.append((entity, model))

    def apply(self) -> None:
        for entity, model in self._pending:
            entity.assign_id(model.id)  # type: ignore[attr-defined]
        self._pending.clear()


# -----------------------------------------------------------------------------
# Model -> domain
# -----------------------------------------------------------------------------


def user_to_domain(model: UserModel) -> User:
    return User(
        id=model.id,
        email=model.email,
        pseudo=model.pseudo,
        password_hash=model.password_hash,
        registration_provider=model.registration_provider,
        registration_status=model.registration_status,
        first_name=model.first_name,
        last_name=model.last_name,
        phone=model.phone,
        is_maker=model.is_maker,
        maker_description=model.maker_description,
        addresses=[_address_to_domain(a) for a in model.addresses],
        maker_tools=[_tool_to_domain(t) for t in model.maker_tools],
        created_at=as_utc(model.created_at),
        updated_at=as_utc(model.updated_at),
    )


# Children are built without an owner; the User constructor attaches them.


def _address_to_domain(model: AddressModel) -> Address:
    return Address(
        id=model.id,
        address=model.address,
        city=model.city,
        country=model.country,
        postal_code=model.postal_code,
        owner=None,  # type: ignore[arg-type]
    )


def _tool_to_domain(model: MakerToolModel) -> MakerTool:
    tool: MakerTool
    if isinstance(model, Printer3DModel):
        tool = Printer3D(
            id=model.id,
            owner=None,  # type: ignore[arg-type]
            name=model.name,
            description=model.description,
            reference=model.reference,
            volume=Dimensions(model.volume_x, model.volume_y, model.volume_z),
            accuracy=Dimensions(
                model.accuracy_x,
                model.accuracy_y,
                model.accuracy_z,
            ),
            layer_thickness=model.layer_thickness,
            printer_type=model.printer_type,
        )
    else:
        tool = MakerTool(
            id=model.id,
            owner=None,  # type: ignore[arg-type]
            name=model.name,
            description=model.description,
            reference=model.reference,
        )

    tool.load_materials(
        Material(
            id=m.id,
            material_type=m.material_type,
            colors=m.colors,
            description=m.description,
            owner=tool,
        )
        for m in model.materials
    )
    return tool


# -----------------------------------------------------------------------------
# Domain -> model
# -----------------------------------------------------------------------------


def new_user_model(user: User, ids: IdentityAssignments) -> UserModel:
    model = UserModel(
        id=user.id,
        email=user.email,
        created_at=user.created_at,
        addresses=[],
        maker_tools=[],
    )
    update_user_model(model, user, ids)
    return model


def update_user_model(model: UserModel, user: User, ids: IdentityAssignments):
    # Email and registration provider never change after creation
    model.registration_provider = user.registration_provider.value
    model.pseudo = user.pseudo
    model.password_hash = user.password_hash
    model.registration_status = user.registration_status.value
    model.first_name = user.first_name
    model.last_name = user.last_name
    model.phone = user.phone
    model.is_maker = user.is_maker
    model.maker_description = user.maker_description
    model.updated_at = user.updated_at

    _sync_children(
        model.addresses,
        user.addresses,
        build=new_address_model,
        update=update_address_model,
        ids=ids,
    )
    _sync_children(
        model.maker_tools,
        user.maker_tools,
        build=lambda tool: new_tool_model(tool, ids),
        update=lambda m, tool: update_tool_model(m, tool, ids),
        ids=ids,
    )


def new_address_model(address: Address) -> AddressModel:
    model = AddressModel(id=address.id)
    update_address_model(model, address)
    return model


def update_address_model(model: AddressModel, address: Address):
    model.address = address.address
    model.city = address.city
    model.country = address.country
    model.postal_code = address.postal_code


def new_tool_model(tool: MakerTool, ids: IdentityAssignments) -> MakerToolModel:
    model_cls = Printer3DModel if isinstance(tool, Printer3D) else MakerToolModel
    model = model_cls(id=tool.id, materials=[])
    update_tool_model(model, tool, ids)
    return model


def update_tool_model(
    model: MakerToolModel,
    tool: MakerTool,
    ids: IdentityAssignments,
):
    model.name = tool.name
    model.description = tool.description
    model.reference = tool.reference

    if isinstance(tool, Printer3D) and isinstance(model, Printer3DModel):
        model.volume_x = tool.volume.x
        model.volume_y = tool.volume.y
        model.volume_z = tool.volume.z
        model.accuracy_x = tool.accuracy.x
        model.accuracy_y = tool.accuracy.y
        model.accuracy_z = tool.accuracy.z
        model.layer_thickness = tool.layer_thickness
        model.printer_type = tool.printer_type.value

    # Materials are immutable: known ids are kept as they are
    _sync_children(
        model.materials,
        tool.materials,
        build=new_material_model,
        update=lambda m, material: None,
        ids=ids,
    )


def new_material_model(material: Material) -> MaterialModel:
    return MaterialModel(
        id=material.id,
        material_type=material.material_type.value,
        colors=material.colors,
        description=material.description,
    )


def _sync_children(
    collection: list[ModelT],
    entities: Iterable[EntityT],
    build: Callable[[EntityT], ModelT],
    update: Callable[[ModelT, EntityT], None],
    ids: IdentityAssignments,
) -> None:
    """Make ``collection`` mirror ``entities``.

    Models whose entity is gone are removed from the collection, which
    deletes them through the delete-orphan cascade.
    """
    by_id = {m.id: m for m in collection}  # type: ignore[attr-defined]
    wanted: list[ModelT] = []
    for entity in entities:
        model = by_id.get(entity.id) if entity.is_persisted else None
        if model is None:
            model = build(entity)
        else:
            update(model, entity)
        ids.track(entity, model)
        wanted.append(model)

    kept = {id(m) for m in wanted}
    for model in list(collection):
        if id(model) not in kept:
            collection.remove(model)

    present = {id(m) for m in collection}
    for model in wanted:
        if id(model) not in present:
            collection.append(model)

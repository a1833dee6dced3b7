"""Query to get one material of one of the caller's tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

from makemeacube.application.services import IdentityResolver
from makemeacube.domain.user import Material
from makemeacube.domain.user.services import OwnershipValidator

if TYPE_CHECKING:
    from makemeacube.application.factories import RepositoryFactory
    from makemeacube.application.ports.identity import Principal


class GetMakerToolMaterialQuery:
    """Resolve user -> tool -> material, checking both owner links."""

    def __init__(
        self,
        ownership_validator: OwnershipValidator,
        current_user: Principal,
    ) -> None:
        self._validator = ownership_validator
        self._caller_id = IdentityResolver.resolve(current_user)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetMakerToolMaterialQuery:
        return cls(
            ownership_validator=OwnershipValidator.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: int, tool_id: int, material_id: int) -> Material:
        chain = await self._validator.material(
            self._caller_id,
            user_id,
            tool_id,
            material_id,
        )
        return chain.material

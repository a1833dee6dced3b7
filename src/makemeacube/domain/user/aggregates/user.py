from datetime import datetime
from typing import Iterable, Optional, Union

from makemeacube.domain.shared.identity import StorageIdentity
from makemeacube.domain.shared.time import utc_now
from makemeacube.domain.user.entities import Address, MakerTool
from makemeacube.domain.user.value_objects import (
    Email,
    RegistrationProvider,
    RegistrationStatus,
)


class User(StorageIdentity):
    """
    User aggregate root.

    Owns the user's addresses and maker tools. The identifier is assigned by
    the persistence gateway on first save. Email and registration provider
    are fixed at creation; everything else may change through updates.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        pseudo: str,
        password_hash: str,
        registration_provider: Union[str, RegistrationProvider],
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        is_maker: bool = False,
        maker_description: Optional[str] = None,
        registration_status: Union[
            str, RegistrationStatus
        ] = RegistrationStatus.PENDING,
        addresses: Iterable[Address] = (),
        maker_tools: Iterable[MakerTool] = (),
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id
        self._email = email if isinstance(email, Email) else Email(email)
        self._pseudo = pseudo
        self._password_hash = password_hash
        self._registration_provider = RegistrationProvider(registration_provider)
        self._first_name = first_name
        self._last_name = last_name
        self._phone = phone
        self._is_maker = is_maker
        self._maker_description = maker_description
        self._registration_status = RegistrationStatus(registration_status)
        self._addresses: list[Address] = []
        self._maker_tools: list[MakerTool] = []
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

        # Children always point at the aggregate instance that holds them
        for address in addresses:
            address.attach_to(self)
            self._addresses.append(address)
        for tool in maker_tools:
            tool.attach_to(self)
            self._maker_tools.append(tool)

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def pseudo(self) -> str:
        return self._pseudo

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def registration_provider(self) -> RegistrationProvider:
        return self._registration_provider

    @property
    def registration_status(self) -> RegistrationStatus:
        return self._registration_status

    @property
    def is_verified(self) -> bool:
        return self._registration_status == RegistrationStatus.VERIFIED

    @property
    def first_name(self) -> Optional[str]:
        return self._first_name

    @property
    def last_name(self) -> Optional[str]:
        return self._last_name

    @property
    def phone(self) -> Optional[str]:
        return self._phone

    @property
    def is_maker(self) -> bool:
        return self._is_maker

    @property
    def maker_description(self) -> Optional[str]:
        return self._maker_description

    @property
    def addresses(self) -> tuple[Address, ...]:
        return tuple(self._addresses)

    @property
    def maker_tools(self) -> tuple[MakerTool, ...]:
        return tuple(self._maker_tools)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def find_address(self, address_id: int) -> Optional[Address]:
        for address in self._addresses:
            if address.id == address_id:
                return address
        return None

    def add_address(self, address: Address) -> None:
        if address.owner is not self:
            msg = "Address must be owned by the user it is added to"
            raise ValueError(msg)
        self._addresses.append(address)
        self._updated_at = utc_now()

    def remove_address(self, address: Address) -> None:
        self._addresses.remove(address)
        self._updated_at = utc_now()

    def find_maker_tool(self, tool_id: int) -> Optional[MakerTool]:
        for tool in self._maker_tools:
            if tool.id == tool_id:
                return tool
        return None

    def add_maker_tool(self, tool: MakerTool) -> None:
        if tool.owner is not self:
            msg = "Maker tool must be owned by the user it is added to"
            raise ValueError(msg)
        self._maker_tools.append(tool)
        self._updated_at = utc_now()

    def remove_maker_tool(self, tool: MakerTool) -> None:
        self._maker_tools.remove(tool)
        self._updated_at = utc_now()

    def verify_email(self) -> None:
        if self.is_verified:
            return
        self._registration_status = RegistrationStatus.VERIFIED
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        pseudo: str,
        password_hash: str,
        registration_provider: RegistrationProvider = RegistrationProvider.LOCAL,
    ) -> "User":
        return cls(
            email=email,
            pseudo=pseudo,
            password_hash=password_hash,
            registration_provider=registration_provider,
        )

    @classmethod
    def create_maker(  # NOQA: PLR0913
        cls,
        email: Union[str, Email],
        pseudo: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
        maker_description: str,
        registration_provider: RegistrationProvider = RegistrationProvider.LOCAL,
    ) -> "User":
        return cls(
            email=email,
            pseudo=pseudo,
            password_hash=password_hash,
            registration_provider=registration_provider,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            is_maker=True,
            maker_description=maker_description,
        )

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"

from dataclasses import InitVar, dataclass
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


@dataclass(frozen=True, repr=False, eq=False)
class Identifier(UUID):
    """Opaque UUID-backed identifier.

    Identifiers of different kinds never compare equal, even when they wrap
    the same bytes:
    ```
    >>> uuid = uuid4()
    >>> BookId(uuid) == PatronId(uuid)
    False
    >>> BookId(uuid) == uuid
    False
    ```
    """

    uuid: InitVar[UUID | None] = None
    from_hex: InitVar[str | None] = None

    def __post_init__(self, uuid: UUID | None, from_hex: str | None) -> None:
        if uuid is not None:
            super().__init__(bytes=uuid.bytes)
        elif from_hex is not None:
            super().__init__(hex=from_hex)
        else:
            super().__init__(bytes=uuid4().bytes)

    def __eq__(self, other: Any) -> bool:
        if type(other) is type(self):
            return self.int == other.int
        if isinstance(other, UUID):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.int))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(hex={self!s})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls._coerce, handler.generate_schema(UUID)
        )

    @classmethod
    def _coerce(cls, value: UUID) -> Self:
        if isinstance(value, cls):
            return value
        return cls(value)


@dataclass(frozen=True, repr=False, eq=False)
class BookId(Identifier):
    pass


@dataclass(frozen=True, repr=False, eq=False)
class PatronId(Identifier):
    pass


@dataclass(frozen=True, repr=False, eq=False)
class LibraryBranchId(Identifier):
    pass


class BookType(str, Enum):
    CIRCULATING = "CIRCULATING"
    RESTRICTED = "RESTRICTED"

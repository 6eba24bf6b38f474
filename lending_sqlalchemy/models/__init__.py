__all__ = [
    "BaseBook",
    "DefaultBook",
    "configure_models",
]

from typing import Protocol

from sqlalchemy import MetaData
from sqlalchemy.orm import registry
from sqlalchemy.orm.clsregistry import ClsRegistryToken

from lending_sqlalchemy.models.base import BaseBook
from lending_sqlalchemy.models.default import DefaultBook


class BaseProto(Protocol):
    metadata: MetaData


_class_registry: dict[str, type | ClsRegistryToken] = {}


def configure_models(
    base: type[BaseProto],
    book_model: type[BaseBook] = DefaultBook,
) -> None:
    """
    Maps the book model onto the metadata of the given declarative base.

    Lets the application keep lending tables next to its own ones, so they are
    created and migrated together. Mapping the same model twice is a no-op.

    Args:
        base (type[BaseProto]):
            Base class providing SQLAlchemy MetaData for model registration.
        book_model (type[BaseBook], optional):
            Book model class to use. Defaults to DefaultBook.
    """
    if book_model in _class_registry.values():
        return

    mapping_registry = registry(metadata=base.metadata, class_registry=_class_registry)
    mapping_registry.map_declaratively(book_model)

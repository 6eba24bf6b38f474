__all__ = [
    "BaseBook",
    "DefaultBook",
    "SqlAlchemyBookRepository",
    "configure_models",
    "models",
]

from lending_sqlalchemy import models
from lending_sqlalchemy.models import BaseBook, DefaultBook, configure_models
from lending_sqlalchemy.repository import SqlAlchemyBookRepository

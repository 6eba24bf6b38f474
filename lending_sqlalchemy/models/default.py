from lending_sqlalchemy.models.base import BaseBook


class DefaultBook(BaseBook):
    __tablename__ = "lending_books"

from tests.backend.sqlalchemy import (  # noqa: F401
    session,
    sqlalchemy_repository,
    sqlite_sessions,
)

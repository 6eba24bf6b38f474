from sqlalchemy import BigInteger, DateTime, Integer, String, Uuid
from sqlalchemy.orm import mapped_column


class BaseBook:
    """One row per book, holding the fields of its current state.

    `patron_id` and `hold_until` are only set for states that have them.
    """

    __tablename__: str

    id = mapped_column(BigInteger().with_variant(Integer(), "sqlite"), primary_key=True)
    uuid = mapped_column(Uuid(), nullable=False, unique=True, index=True)
    book_type = mapped_column(String(32), nullable=False)
    state = mapped_column(String(32), nullable=False)
    branch_id = mapped_column(Uuid(), nullable=False)
    patron_id = mapped_column(Uuid(), nullable=True, default=None)
    hold_until = mapped_column(DateTime(), nullable=True, default=None)
    version = mapped_column(BigInteger(), nullable=False)

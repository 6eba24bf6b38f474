from dataclasses import dataclass

from typing_extensions import Self


@dataclass(frozen=True, order=True)
class Version:
    """Optimistic concurrency tag of an aggregate.

    Starts at `Version.zero()` and only ever moves forward with `next()`.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Version cannot be negative, got {self.value}")

    @classmethod
    def zero(cls) -> Self:
        return cls(0)

    def next(self) -> "Version":
        return Version(self.value + 1)

    def __int__(self) -> int:
        return self.value

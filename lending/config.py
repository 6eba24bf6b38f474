from pydantic import BaseModel, ConfigDict, PositiveInt


class Config(BaseModel):
    """
    Configuration of the lending application layer.

    Attributes:
        conflict_attempts (PositiveInt):
            How many times an event is handled against a freshly loaded book when
            saving keeps failing with a concurrent write, before giving up.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    conflict_attempts: PositiveInt = 3

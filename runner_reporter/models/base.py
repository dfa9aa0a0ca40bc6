"""Base model shared by events and execution data."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that rejects unknown fields.

    Events are consumed exactly once, but rendering must be repeatable, so
    nothing downstream is allowed to mutate them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

"""Persistable generator state."""
from pydantic import BaseModel, ConfigDict, Field

# Largest value the 48-bit seed register can hold
SEED_MAX = (1 << 48) - 1


class RandomState(BaseModel):
    """
    Snapshot of a JavaRandom generator.

    Holds the scrambled internal seed exactly as JavaRandom.seed reports
    it. Restoring from a snapshot continues the original sequence; it is
    not the raw seed a caller passed to the constructor.
    """

    model_config = ConfigDict(frozen=True)

    seed: int = Field(ge=0, le=SEED_MAX)

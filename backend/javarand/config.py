"""Library configuration derived from the environment."""
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings with defaults suitable for library use."""

    model_config = ConfigDict(env_prefix="JAVARAND_")

    # Seeding: raw seed used by JavaRandom() instead of the wall clock
    default_seed: int | None = None

    # Logging level applied by the command line scripts
    log_level: str = "WARNING"

    # Number of draws printed by scripts.dump_sequence
    dump_count: int = 10


settings = Settings()

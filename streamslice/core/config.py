from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SliceSettings(BaseSettings):
    """Runtime settings, read from ``STREAMSLICE_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="STREAMSLICE_", extra="ignore")

    log_level: str = Field(
        "WARNING", description="Minimum level of log records written to stderr."
    )
    debug_scopes: tuple[str, ...] = Field(
        (),
        description=(
            "Module prefixes (e.g. core.resolver) whose DEBUG records are shown "
            "regardless of log_level."
        ),
    )
    chunk_size: int = Field(
        64 * 1024,
        gt=0,
        description="Block size in bytes for chunked reads and counting passes.",
    )
    colorize_logs: bool = Field(False, description="Colorize stderr log output.")

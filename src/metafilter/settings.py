"""Settings for metafilter."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class MetaFilterSettings(BaseSettings):
    """metafilter configuration settings."""

    LOG_LEVEL: str = "INFO"

    # Dialect used by `get_converter()` and `Expression.to_expr()` when none is given
    DEFAULT_DIALECT: str = "generic"

    # Field reference prefix of the generic dialect, e.g. '$.age'
    JSON_PATH_PREFIX: str = "$."

    # Column holding JSON metadata in SQL-like stores
    METADATA_COLUMN: str = "metadata"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = MetaFilterSettings()

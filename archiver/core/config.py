from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_mode(value: int | str) -> int:
    """Accept directory modes as ints or octal strings.

    ``"755"``, ``"0755"`` and ``"0o755"`` all map to ``0o755``. Environment
    variables always arrive as strings, and a plain ``int("755")`` would be
    read as decimal.
    """
    if isinstance(value, int):
        return value
    text = value.strip().lower()
    if text.startswith("0o"):
        text = text[2:]
    return int(text, 8)


class Settings(BaseSettings):
    """Archiver settings loaded from ``ARCHIVER_*`` environment variables.

    Only transfer and filesystem tuning lives here. What to archive is
    described per call by a PackageDefinition, never by the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARCHIVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # HTTP downloads
    http_timeout_seconds: float = 60.0
    http_follow_redirects: bool = True
    download_chunk_size: int = 1024 * 1024

    # GCS — blank uses the client library's default project resolution.
    gcs_project: str = ""

    # Staging
    staging_dir_mode: int = 0o755

    @field_validator("staging_dir_mode", mode="before")
    @classmethod
    def parse_staging_dir_mode(cls, v: int | str) -> int:
        return _parse_mode(v)

    @field_validator("http_timeout_seconds")
    @classmethod
    def timeout_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be positive")
        return v

    @field_validator("download_chunk_size")
    @classmethod
    def chunk_size_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("download_chunk_size must be positive")
        return v

    # App
    debug: bool = False


def get_settings() -> Settings:
    return Settings()

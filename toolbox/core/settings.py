"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

HASH_MAX_UPLOAD_BYTES_DEFAULT = 64 * 1024 * 1024
UUID_MAX_COUNT_DEFAULT = 1000


class ToolboxSettings(BaseSettings):
    """Settings for the toolbox command API."""

    model_config = SettingsConfigDict(env_prefix="TOOLBOX_")

    cors_origins: str = ""
    api_token: str = ""
    log_level: str = "INFO"
    hash_max_upload_bytes: int = HASH_MAX_UPLOAD_BYTES_DEFAULT
    uuid_max_count: int = UUID_MAX_COUNT_DEFAULT

    def get_cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins."""
        if not self.cors_origins:
            return []
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Customizer Sanitize API", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cms_api_url: str | None = Field(default=None, alias="CMS_API_URL")
    cms_status_path: str = Field(default="/wp/v2/pages/{id}", alias="CMS_STATUS_PATH")
    cms_timeout_s: float = Field(default=5.0, alias="CMS_TIMEOUT_S")
    published_status: str = Field(default="publish", alias="PUBLISHED_STATUS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

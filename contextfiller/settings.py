# contextfiller/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="ContextFiller")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)

    # build/deploy-time credential; wins over the saved one
    GEMINI_API_KEY: str | None = None

    # model endpoint
    GEMINI_MODEL: str = Field(default="gemini-2.5-flash")
    GEMINI_BASE_URL: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    GEMINI_TIMEOUT_S: float = Field(default=60.0)

    # where a user-supplied key is remembered
    CREDENTIAL_STORE_PATH: str = Field(default="~/.contextfiller/credentials.yaml")

    # "gemini" or "echo" (offline dev)
    FILLER_ENGINE: str = Field(default="gemini")

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()

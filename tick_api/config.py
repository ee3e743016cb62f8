from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="", extra="ignore")

    # Tick API
    TICK_BASE_URL: str = "https://www.tickspot.com"
    TICK_API_VERSION: str = "v2"
    TICK_TIMEOUT: float = 20.0

    # Credentials (only read by TickClient.from_env)
    TICK_SUBSCRIPTION_ID: str | None = None
    TICK_API_TOKEN: str | None = None  # do not commit
    TICK_USER_AGENT: str | None = None

    # Observability
    LOG_JSON: bool = False


class TickConfig(BaseModel):
    """Credentials for one Tick subscription."""
    model_config = ConfigDict(frozen=True)

    subscription_id: str
    api_token: str = Field(repr=False)
    user_agent: str


settings = Settings()

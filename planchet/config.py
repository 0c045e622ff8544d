from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.numista.com/v3"


class Settings(BaseSettings):
    """Client settings loaded from the environment (NUMISTA_*) and .env."""

    model_config = SettingsConfigDict(env_prefix="NUMISTA_", env_file=".env", extra="ignore")

    api_key: str = ""
    api_url: str = DEFAULT_API_URL

    # ISO 639-1 code; Numista answers in English when unset
    lang: str | None = None

    timeout: float = 30.0


def load_settings() -> Settings:
    """Read settings fresh from the environment."""
    return Settings()

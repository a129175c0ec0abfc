from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    port: int = 8000
    debug: bool = False

    # Google Gemini
    # Left empty the service still starts; every search then fails at request time.
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.5

    # Theme preference
    theme_store_path: str = ".scenebay/theme.json"
    default_theme_dark: bool = False  # stand-in for the OS dark-mode preference

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict

# Scryfall rejects overly long search URLs, so name filters are split
# across several requests once the encoded query reaches this length
MAX_QUERY_LENGTH = 1000


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDCHECK_")

    app_name: str = "CardCheck"
    debug: bool = False

    scryfall_search_url: str = "https://api.scryfall.com/cards/search"

    max_query_length: int = MAX_QUERY_LENGTH

    user_agent: str = "CardCheck/1.0"

    # Seconds; the only timeout applied to search requests
    request_timeout: float = 30.0


settings = Settings()

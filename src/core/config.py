"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "moviebot"
    debug: bool = False
    log_level: str = "INFO"

    # Telegram Bot API
    telegram_bot_token: str = ""
    telegram_api_base_url: str = "https://api.telegram.org/bot"
    telegram_send_message_path: str = "/sendMessage"

    # Movie listing site
    imdb_search_url: str = "https://www.imdb.com/search/keyword/?keywords="
    movie_title_selector: str = 'h3[class="lister-item-header"]'

    # Outbound HTTP
    http_timeout_seconds: float = 10.0

    @property
    def bot_api_url(self) -> str:
        """Bot API prefix including the secret token."""
        return f"{self.telegram_api_base_url}{self.telegram_bot_token}"

    @property
    def send_message_url(self) -> str:
        """Full sendMessage endpoint for this bot."""
        return f"{self.bot_api_url}{self.telegram_send_message_path}"


settings = Settings()

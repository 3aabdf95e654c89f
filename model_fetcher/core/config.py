"""
Configuration management for the league model fetcher.
"""
import os
from typing import List, Optional
from pydantic_settings import BaseSettings


DEFAULT_MODEL_URL_TEMPLATE = (
    "https://gist.githubusercontent.com/gimel-apps/"
    "021ae619f96b26b38c3539097f485122/raw/model_{league_code}.txt"
)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    app_name: str = "League Model Fetcher"
    version: str = "1.0.0"

    # Remote model host; {league_code} is substituted verbatim
    model_url_template: str = DEFAULT_MODEL_URL_TEMPLATE

    # Request timeout in seconds (None = no timeout)
    model_request_timeout: Optional[float] = None

    # Comma separated league codes warmed by the prefetch script
    league_codes: str = "E0,E1,SP1,D1,I1,F1"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def league_code_list(self) -> List[str]:
        """Configured league codes as a list."""
        return [code.strip() for code in self.league_codes.split(",") if code.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
        protected_namespaces = ()


# Global settings instance
settings = Settings()

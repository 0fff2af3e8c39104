"""HomePlan configuration settings.

Loads configuration from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load .env file for local overrides (text generation host, ports, log level)
load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Text generation (Ollama-compatible endpoint)
    text_generation_url: str = field(
        default_factory=lambda: os.getenv("TEXT_GENERATION_URL", "http://localhost:11434/api/generate")
    )
    text_generation_model: str = field(
        default_factory=lambda: os.getenv("TEXT_GENERATION_MODEL", "granite3.3:2b")
    )
    text_generation_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("TEXT_GENERATION_TIMEOUT_SECONDS", "120"))
    )

    # HTTP API
    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", "127.0.0.1"))
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "3001")))
    cors_origin: str = field(default_factory=lambda: os.getenv("CORS_ORIGIN", "*"))

    def validate(self) -> None:
        """Validate settings values.

        Raises:
            ValueError: If a setting is out of range.
        """
        if self.text_generation_timeout_seconds <= 0:
            raise ValueError("TEXT_GENERATION_TIMEOUT_SECONDS must be positive")
        if not 0 < self.api_port < 65536:
            raise ValueError(f"API_PORT out of range: {self.api_port}")


# Singleton settings instance
settings = Settings()

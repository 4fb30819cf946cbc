"""
Configuration module for the State Compare backend.

Loads environment variables and validates required settings.
"""
import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""

    # Google Gemini API
    # GOOGLE_API_KEY is accepted as a fallback so the same .env works with other Gemini tooling
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "") or os.getenv("GOOGLE_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-3-pro-preview")
    # Empty string disables the thinking config entirely
    GEMINI_THINKING_LEVEL: str = os.getenv("GEMINI_THINKING_LEVEL", "LOW")

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings
    CORS_ENABLED: bool = _env_flag("CORS_ENABLED")

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing.
        """
        required_settings = {
            "GEMINI_API_KEY": cls.GEMINI_API_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )


# Create a singleton instance
settings = Settings()

# The API key is checked again on every request, so a missing key only warns here.
# The endpoint answers 500 until it is configured.
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        print(f"⚠️  Warning: {e}")
        print("   /api/gemini-recommendation will answer 500 until GEMINI_API_KEY is set.")

"""Configuration settings for the generative UI service"""
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings.

    Priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values

    Per-request model configuration (modelsConfig) is merged over the
    defaults built from these settings, see default_models_config().
    """

    # Service Identity
    SERVICE_NAME: str = "genui"
    SERVICE_PORT: int = 5002
    LOG_LEVEL: str = "INFO"

    # Provider credentials
    ANTHROPIC_API_KEY: str = ""
    GOOGLE_API_KEY: str = ""
    OPENAI_API_KEY: str = ""

    # Two-Model Strategy:
    # - DESIGN_MODEL: Fast model for the design analysis phase
    # - UI_MODEL: Stronger model for structured JSON generation
    DESIGN_MODEL: str = "gemini-2.5-flash"
    UI_MODEL: str = "claude-sonnet-4-20250514"

    # Sampling - low temperature keeps JSON output stable
    MODEL_TEMPERATURE: float = 0.1
    MAX_TOKENS: int = 8192

    # Substituted when the caller gives no design brief
    DEFAULT_DESIGN_CONTEXT: str = "Modern, clean design with good usability"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def api_key_for_model(self, model: str) -> str:
        """
        Look up the configured credential for a model id.

        Returns an empty string when the model belongs to no known provider
        or the provider key is not set.
        """
        from generative_ui.services.llm_provider import ModelProvider, get_model_provider

        provider = get_model_provider(model)
        keys = {
            ModelProvider.GOOGLE: self.GOOGLE_API_KEY,
            ModelProvider.ANTHROPIC: self.ANTHROPIC_API_KEY,
            ModelProvider.OPENAI: self.OPENAI_API_KEY,
        }
        return keys.get(provider, "")


# Global settings instance
settings = Settings()


def default_models_config():
    """
    Build the built-in model configuration for both pipeline stages.

    Each stage gets its model id from settings and the credential of the
    provider that serves that model.
    """
    from generative_ui.engine.models import ModelConfig, ModelsConfig

    return ModelsConfig(
        design_model=ModelConfig(
            api_key=settings.api_key_for_model(settings.DESIGN_MODEL),
            model=settings.DESIGN_MODEL,
        ),
        ui_model=ModelConfig(
            api_key=settings.api_key_for_model(settings.UI_MODEL),
            model=settings.UI_MODEL,
        ),
    )


def log_settings():
    """Log the effective configuration with credentials masked."""
    def mask(value: str) -> str:
        return "*" * 20 + value[-4:] if value else "NOT SET"

    logger.info(f"Service: {settings.SERVICE_NAME}")
    logger.info(f"Port: {settings.SERVICE_PORT}")
    logger.info(f"Design model: {settings.DESIGN_MODEL}")
    logger.info(f"UI model: {settings.UI_MODEL}")
    logger.info(f"Anthropic API Key: {mask(settings.ANTHROPIC_API_KEY)}")
    logger.info(f"Google API Key: {mask(settings.GOOGLE_API_KEY)}")
    logger.info(f"OpenAI API Key: {mask(settings.OPENAI_API_KEY)}")

"""Exceptions raised by the generation pipeline"""
from typing import Optional

DESIGN_ANALYSIS_STAGE = "design-analysis"
UI_GENERATION_STAGE = "ui-generation"

_STAGE_TITLES = {
    DESIGN_ANALYSIS_STAGE: "Design analysis",
    UI_GENERATION_STAGE: "UI generation",
}


class GenerativeUIError(Exception):
    """Base exception for all pipeline errors."""
    pass


class ConfigurationError(GenerativeUIError):
    """Model configuration rejected before any network call."""
    pass


class MissingCredentialError(ConfigurationError):
    def __init__(self, model: str = ""):
        self.model = model
        suffix = f" (model: {model})" if model else ""
        super().__init__(f"API key is required to create a model.{suffix}")


class UnsupportedModelError(ConfigurationError):
    def __init__(self, model: str, supported: Optional[list] = None):
        self.model = model
        self.supported = supported or []
        message = f"Unsupported model: {model}."
        if self.supported:
            message += f" Supported models: {', '.join(self.supported)}"
        super().__init__(message)


class StageExecutionError(GenerativeUIError):
    """A pipeline stage failed, tagged with the stage that raised it."""

    def __init__(self, stage: str, message: str, original_exception: Optional[Exception] = None):
        self.stage = stage
        self.message = message
        self.original_exception = original_exception
        title = _STAGE_TITLES.get(stage, stage)
        super().__init__(f"{title} failed: {message}")


class MalformedOutputError(StageExecutionError):
    """UI generation output could not be parsed as JSON."""

    def __init__(self, raw_text: str, parse_error: Exception):
        self.raw_text = raw_text
        self.parse_error = parse_error
        super().__init__(
            UI_GENERATION_STAGE,
            f"model output is not valid JSON ({parse_error})",
            parse_error,
        )

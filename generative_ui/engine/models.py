"""Data models for the generation pipeline"""
import time
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModelConfig(BaseModel):
    """Credential and model id for one model client"""
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    api_key: str = Field("", alias="apiKey")
    model: str = ""


class ModelsConfig(BaseModel):
    """Model configuration for both pipeline stages"""
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    design_model: Optional[ModelConfig] = Field(None, alias="designModel")
    ui_model: Optional[ModelConfig] = Field(None, alias="uiModel")

    def merged_over(self, defaults: "ModelsConfig") -> "ModelsConfig":
        """
        Merge this configuration over defaults, field by field.

        Only fields the caller explicitly set take precedence, so a caller
        can override just the model id and keep the default credential.
        A model id from another provider without an explicit key takes the
        configured key of the new model's provider instead.
        """
        from generative_ui.config import settings
        from generative_ui.services.llm_provider import get_model_provider

        merged = {}
        for name in ("design_model", "ui_model"):
            base = getattr(defaults, name) or ModelConfig()
            override = getattr(self, name)
            values = base.model_dump()
            if override is not None:
                explicit = override.model_dump(exclude_unset=True)
                values.update(explicit)
                if (
                    "model" in explicit
                    and "api_key" not in explicit
                    and get_model_provider(values["model"]) != get_model_provider(base.model)
                ):
                    values["api_key"] = settings.api_key_for_model(values["model"])
            merged[name] = ModelConfig(**values)
        return ModelsConfig(**merged)


class DesignAnalysisInput(BaseModel):
    content: str
    design_context: Optional[str] = None


class DesignAnalysisOutput(BaseModel):
    design: str


class GenUIInput(BaseModel):
    content: str
    design: str


# ----- Canonical UI-tree shape -----
# The UI generation stage asks the model for this shape but returns whatever
# JSON it gets back; these types describe the output for consumers.

class ThemeColors(BaseModel):
    primary: str
    secondary: str
    background: str
    surface: Optional[str] = None
    text: str
    accent: Optional[str] = None
    error: Optional[str] = None


class Typography(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    font_family: Optional[str] = Field(None, alias="fontFamily")
    heading_scale: Optional[str] = Field(None, alias="headingScale")
    body_size: Optional[str] = Field(None, alias="bodySize")


class Theme(BaseModel):
    colors: ThemeColors
    typography: Optional[Typography] = None
    spacing: Optional[Dict[str, Any]] = None


class UIElement(BaseModel):
    id: str
    type: str
    props: Dict[str, Any] = {}
    content: Optional[Union[str, Dict[str, Any]]] = None
    children: Optional[List["UIElement"]] = None


class GenUIOutput(BaseModel):
    theme: Theme
    root: UIElement


# ----- Execution state -----

class ExecutionPhase(str, Enum):
    DESIGN_ANALYSIS = "design-analysis"
    GEN_UI = "gen-ui"
    COMPLETED = "completed"

    @property
    def order(self) -> int:
        return _PHASE_ORDER.index(self)


_PHASE_ORDER = [
    ExecutionPhase.DESIGN_ANALYSIS,
    ExecutionPhase.GEN_UI,
    ExecutionPhase.COMPLETED,
]


class ChainResult(BaseModel):
    """Intermediate outputs keyed by the phase that produced them"""
    model_config = ConfigDict(populate_by_name=True)

    design_analysis: Optional[DesignAnalysisOutput] = Field(None, alias="designAnalysis")
    gen_ui: Optional[Any] = Field(None, alias="genUI")


class ExecutionContext(BaseModel):
    """Run state of one orchestrator: current phase and accumulated outputs"""
    model_config = ConfigDict(populate_by_name=True)

    start_time: float = Field(default_factory=time.time, alias="startTime")
    current_phase: ExecutionPhase = Field(ExecutionPhase.DESIGN_ANALYSIS, alias="currentPhase")
    intermediate_results: ChainResult = Field(default_factory=ChainResult, alias="intermediateResults")

    def advance(self, phase: ExecutionPhase):
        """Move to phase; phases never go backwards within a run."""
        if phase.order < self.current_phase.order:
            raise ValueError(
                f"Cannot move from phase '{self.current_phase.value}' back to '{phase.value}'"
            )
        self.current_phase = phase


class GenerateUIParams(BaseModel):
    """Input to a pipeline run"""
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    content: str
    design: Optional[str] = None
    models_config: Optional[ModelsConfig] = Field(None, alias="modelsConfig")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("content must not be empty")
        return v


class GenerateUIResult(BaseModel):
    """Outcome of a pipeline run; execution_time is in milliseconds"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    execution_time: float = Field(0.0, ge=0, alias="executionTime")

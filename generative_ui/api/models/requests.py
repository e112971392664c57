"""Request and response models for API endpoints"""
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional

from generative_ui.engine.models import (
    ChainResult,
    ExecutionContext,
    GenerateUIParams,
    GenerateUIResult,
    ModelsConfig,
)


class GenerateRequest(BaseModel):
    """Request to generate a UI from content"""
    model_config = ConfigDict(protected_namespaces=())

    content: str
    design: Optional[str] = None
    modelsConfig: Optional[ModelsConfig] = None
    useSequentialChain: bool = False   # Run the composed chain instead of explicit steps

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must not be empty")
        return v.strip()

    @field_validator("design")
    @classmethod
    def strip_design(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v else v

    def to_params(self) -> GenerateUIParams:
        return GenerateUIParams(
            content=self.content,
            design=self.design,
            models_config=self.modelsConfig
        )


class GenerateResponse(BaseModel):
    """Pipeline result plus the run state of the orchestrator"""
    result: GenerateUIResult
    context: ExecutionContext
    intermediateResults: ChainResult


class AnalyzeRequest(BaseModel):
    """Request to run design analysis only"""
    model_config = ConfigDict(protected_namespaces=())

    content: str
    design: Optional[str] = None
    modelsConfig: Optional[ModelsConfig] = None

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must not be empty")
        return v

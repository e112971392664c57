"""API models package"""
from generative_ui.api.models.requests import (
    AnalyzeRequest,
    GenerateRequest,
    GenerateResponse,
)

__all__ = [
    "AnalyzeRequest",
    "GenerateRequest",
    "GenerateResponse",
]

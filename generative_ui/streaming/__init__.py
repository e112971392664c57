"""Streaming package for SSE progress updates"""
from generative_ui.streaming.events import EventType, ProgressEvent, ProgressCallback

__all__ = [
    "EventType",
    "ProgressEvent",
    "ProgressCallback"
]

"""Utility helpers"""
from generative_ui.utils.json_output import parse_json_output, strip_code_fence

__all__ = [
    "parse_json_output",
    "strip_code_fence",
]

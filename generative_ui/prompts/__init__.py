"""Prompt templates for the two pipeline stages"""
from generative_ui.prompts.design_analysis import DESIGN_ANALYSIS_PROMPT
from generative_ui.prompts.gen_ui import GEN_UI_PROMPT


def render_prompt(template: str, **slots: str) -> str:
    """Substitute the named slots of a template literally"""
    return template.format(**slots)


__all__ = [
    "DESIGN_ANALYSIS_PROMPT",
    "GEN_UI_PROMPT",
    "render_prompt",
]

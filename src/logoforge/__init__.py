"""Logoforge - reference logo generation from a structured design brief."""

__version__ = "0.1.0"

from logoforge.core.config import LogoforgeConfig, config
from logoforge.core.prompt_builder import build_prompt, build_prompt_for_request
from logoforge.core.request import GenerationRequest, LogoType, normalize_form_fields

__all__ = [
    "GenerationRequest",
    "LogoType",
    "LogoforgeConfig",
    "build_prompt",
    "build_prompt_for_request",
    "config",
    "normalize_form_fields",
]

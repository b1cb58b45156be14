"""Core components for Logoforge.

Modules
-------
config
    Environment-driven settings (pydantic-settings).
request
    ``LogoType``, ``GenerationRequest`` and form-field normalization.
validation
    The required-field check and its user-facing ``ValidationError``.
prompt_builder
    Pure prompt construction from a ``GenerationRequest``.
image_client
    The image-generation collaborator and its OpenAI implementation.
controller
    Form controller: view state and the generate/submit handlers.
"""

from logoforge.core.config import LogoforgeConfig, config
from logoforge.core.controller import FormView, GenerationContext, handle_generate, handle_submit
from logoforge.core.image_client import (
    GeneratedImage,
    ImageGenerationError,
    ImageGenerator,
    OpenAIImageGenerator,
)

__all__ = [
    "FormView",
    "GeneratedImage",
    "GenerationContext",
    "ImageGenerationError",
    "ImageGenerator",
    "LogoforgeConfig",
    "OpenAIImageGenerator",
    "config",
    "handle_generate",
    "handle_submit",
]

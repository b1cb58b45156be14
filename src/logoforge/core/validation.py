"""Validation for generation requests."""

import logging

from .request import GenerationRequest

logger = logging.getLogger(__name__)

ORGANIZATION_REQUIRED_MESSAGE = "Please enter the organization name."


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


def validate_generation_request(request: GenerationRequest) -> None:
    """Validate a normalized request with a user-friendly message.

    The organization name is the only required field; everything else
    has a fallback clause in the prompt.

    Args:
        request: Normalized generation request

    Raises:
        ValidationError: If the organization name is blank
    """
    if not request.organization.strip():
        logger.debug("Rejected generation request without an organization name")
        raise ValidationError(ORGANIZATION_REQUIRED_MESSAGE)

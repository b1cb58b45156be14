"""Form controller for the reference logo page.

The controller owns everything between the raw form values and the three
UI surfaces the page updates: the status text, the trigger button (label
and disabled flag) and the image/placeholder pair.  Those surfaces are
modelled by :class:`FormView`, which the HTTP layer serializes back to the
browser.

A :class:`GenerationContext` is built once at startup and handed to the
handlers explicitly.  It carries the image generator and the fixed output
size; nothing else is shared between requests.

Generate Flow
-------------
1. Ignore the action if the trigger control is already disabled.
2. Normalize the form fields and check the organization name.
3. Disable the trigger control and build the prompt.
4. Await the generator (the only suspension point).
5. Render the inline payload, else the remote address, else fail.
6. Re-enable the trigger control, whatever happened.

Every failure ends up as status text.  Nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from .image_client import DEFAULT_SIZE, ImageGenerationError, ImageGenerator
from .prompt_builder import build_prompt_for_request
from .request import normalize_form_fields
from .validation import ValidationError, validate_generation_request

logger = logging.getLogger(__name__)

BUTTON_LABEL_IDLE = "Generate reference logo"
BUTTON_LABEL_BUSY = "Generating..."

STATUS_GENERATED = "Logo generated."
STATUS_GENERATION_FAILED = "Generation failed."
STATUS_IMAGE_MISSING = "Failed to retrieve the image."
STATUS_SUBMIT_PLACEHOLDER = "Thank you! This form does not submit data yet."


@dataclass
class GenerationContext:
    """Startup-scoped dependencies of the controller.

    Attributes:
        generator: Image-generation collaborator.
        image_size: Output size descriptor sent with every call.
    """

    generator: ImageGenerator
    image_size: str = DEFAULT_SIZE


@dataclass
class FormView:
    """State of the page's UI surfaces after an interaction."""

    status: str = ""
    button_label: str = BUTTON_LABEL_IDLE
    button_disabled: bool = False
    image_src: str | None = None
    placeholder_visible: bool = True
    prompt: str | None = None

    def set_status(self, message: str) -> None:
        self.status = message

    def set_loading(self, is_loading: bool) -> None:
        self.button_disabled = is_loading
        self.button_label = BUTTON_LABEL_BUSY if is_loading else BUTTON_LABEL_IDLE

    def render_image(self, source: str) -> None:
        self.image_src = source
        self.placeholder_visible = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _error_message(error: Exception) -> str:
    """Extract the user-facing text of a failure.

    OpenAI SDK errors carry a ``message`` attribute without the HTTP
    preamble that ``str()`` adds; other exceptions use ``str()``.
    """
    message = getattr(error, "message", None)
    if not isinstance(message, str) or not message.strip():
        message = str(error)
    return message.strip() or STATUS_GENERATION_FAILED


async def handle_generate(
    context: GenerationContext,
    fields: Mapping[str, Any] | None,
    view: FormView | None = None,
) -> FormView:
    """Handle a click on the generate button.

    Args:
        context: Startup-scoped dependencies.
        fields: Raw form values keyed by DOM field name.
        view: Current view state.  A fresh idle view is used when omitted.

    Returns:
        The updated view.  Failures are reported through ``view.status``;
        this coroutine does not raise for validation or generation errors.
    """
    if view is None:
        view = FormView()

    if view.button_disabled:
        logger.debug("Generate ignored: a request is already in flight")
        return view

    request = normalize_form_fields(fields)
    try:
        validate_generation_request(request)
    except ValidationError as e:
        view.set_status(str(e))
        return view

    view.set_status("")
    view.set_loading(True)

    try:
        prompt = build_prompt_for_request(request)
        view.prompt = prompt
        logger.info(f"Generating logo for '{request.organization}' ({request.logo_type.value})")

        image = await context.generator.generate(prompt, size=context.image_size)

        source = image.as_image_source()
        if source is None:
            raise ImageGenerationError(STATUS_IMAGE_MISSING)

        view.render_image(source)
        view.set_status(STATUS_GENERATED)

    except Exception as e:
        logger.error(f"Logo generation failed: {e}", exc_info=True)
        view.set_status(_error_message(e))

    finally:
        view.set_loading(False)

    return view


def handle_submit(view: FormView | None = None) -> FormView:
    """Handle a direct form submission.

    The form does not submit anywhere; this only shows a notice.
    """
    if view is None:
        view = FormView()
    view.set_status(STATUS_SUBMIT_PLACEHOLDER)
    return view

"""Tests for logoforge.core.controller: The form controller.

Tests cover:
- Validation rejection without touching the generator.
- The loading state around a generation attempt.
- Rendering of inline payloads and remote addresses.
- Error surfacing through the status text.
- The advisory in-flight guard and the direct-submit notice.
"""

from __future__ import annotations

import asyncio

import pytest

from logoforge.core.controller import (
    BUTTON_LABEL_BUSY,
    BUTTON_LABEL_IDLE,
    STATUS_GENERATED,
    STATUS_GENERATION_FAILED,
    STATUS_IMAGE_MISSING,
    STATUS_SUBMIT_PLACEHOLDER,
    FormView,
    GenerationContext,
    handle_generate,
    handle_submit,
)
from logoforge.core.image_client import GeneratedImage
from logoforge.core.validation import ORGANIZATION_REQUIRED_MESSAGE


def _run(context, fields, view=None) -> FormView:
    return asyncio.run(handle_generate(context, fields, view))


class TestFormView:
    """Test FormView state transitions."""

    def test_initial_state(self):
        view = FormView()
        assert view.status == ""
        assert view.button_label == BUTTON_LABEL_IDLE
        assert view.button_disabled is False
        assert view.image_src is None
        assert view.placeholder_visible is True

    def test_set_loading_toggles_button(self):
        view = FormView()
        view.set_loading(True)
        assert view.button_disabled is True
        assert view.button_label == BUTTON_LABEL_BUSY
        view.set_loading(False)
        assert view.button_disabled is False
        assert view.button_label == BUTTON_LABEL_IDLE

    def test_render_image_hides_placeholder(self):
        view = FormView()
        view.render_image("https://cdn.example/logo.png")
        assert view.image_src == "https://cdn.example/logo.png"
        assert view.placeholder_visible is False

    def test_to_dict_keys(self):
        assert set(FormView().to_dict()) == {
            "status",
            "button_label",
            "button_disabled",
            "image_src",
            "placeholder_visible",
            "prompt",
        }


class TestHandleGenerateValidation:
    """Blank organization names never reach the generator."""

    @pytest.mark.parametrize("organization", ["", "   ", None])
    def test_blank_organization(self, generation_context, fake_generator, organization):
        view = _run(generation_context, {"organization": organization, "wishes": "bold"})

        assert view.status == ORGANIZATION_REQUIRED_MESSAGE
        assert fake_generator.calls == []
        assert view.prompt is None
        assert view.button_disabled is False
        assert view.button_label == BUTTON_LABEL_IDLE

    def test_missing_organization_key(self, generation_context, fake_generator):
        view = _run(generation_context, {})
        assert view.status == ORGANIZATION_REQUIRED_MESSAGE
        assert fake_generator.calls == []


class TestHandleGenerateSuccess:
    """Successful generation paths."""

    def test_inline_payload_rendered_as_data_url(self, generation_context, sample_form):
        view = _run(generation_context, sample_form)

        assert view.image_src == "data:image/png;base64,aGVsbG8="
        assert view.placeholder_visible is False
        assert view.status == STATUS_GENERATED

    def test_remote_address_rendered(self, make_generator, sample_form):
        generator = make_generator(result=GeneratedImage(url="https://cdn.example/a.png"))
        context = GenerationContext(generator=generator)

        view = _run(context, sample_form)

        assert view.image_src == "https://cdn.example/a.png"
        assert view.status == STATUS_GENERATED

    def test_inline_payload_takes_priority(self, make_generator, sample_form):
        generator = make_generator(
            result=GeneratedImage(b64_json="QUJD", url="https://cdn.example/a.png")
        )
        view = _run(GenerationContext(generator=generator), sample_form)
        assert view.image_src == "data:image/png;base64,QUJD"

    def test_prompt_and_size_passed_to_generator(self, fake_generator, sample_form):
        context = GenerationContext(generator=fake_generator, image_size="1536x1024")

        view = _run(context, sample_form)

        assert len(fake_generator.calls) == 1
        call = fake_generator.calls[0]
        assert call["size"] == "1536x1024"
        assert call["prompt"] == view.prompt
        assert "Organization name: Nova Labs." in call["prompt"]
        assert "Logo type: text and icon." in call["prompt"]

    def test_button_reenabled_after_success(self, generation_context, sample_form):
        view = _run(generation_context, sample_form)
        assert view.button_disabled is False
        assert view.button_label == BUTTON_LABEL_IDLE

    def test_button_disabled_while_in_flight(self, sample_form):
        observed: list[tuple[bool, str]] = []
        view = FormView()

        class _ObservingGenerator:
            async def generate(self, prompt, *, size="1024x1024"):
                observed.append((view.button_disabled, view.button_label))
                return GeneratedImage(b64_json="QUJD")

        context = GenerationContext(generator=_ObservingGenerator())
        asyncio.run(handle_generate(context, sample_form, view))

        assert observed == [(True, BUTTON_LABEL_BUSY)]
        assert view.button_disabled is False


class TestHandleGenerateFailure:
    """Failures end up in the status text."""

    def test_error_message_surfaced(self, make_generator, sample_form):
        generator = make_generator(error=RuntimeError("rate limited"))
        view = _run(GenerationContext(generator=generator), sample_form)

        assert view.status == "rate limited"
        assert view.image_src is None
        assert view.placeholder_visible is True
        assert view.button_disabled is False

    def test_message_attribute_preferred(self, make_generator, sample_form):
        class _ApiError(Exception):
            def __init__(self):
                super().__init__("Error code: 429 - {'error': 'quota'}")
                self.message = "You exceeded your current quota."

        generator = make_generator(error=_ApiError())
        view = _run(GenerationContext(generator=generator), sample_form)
        assert view.status == "You exceeded your current quota."

    def test_empty_message_uses_generic_fallback(self, make_generator, sample_form):
        generator = make_generator(error=RuntimeError())
        view = _run(GenerationContext(generator=generator), sample_form)
        assert view.status == STATUS_GENERATION_FAILED

    def test_response_without_image(self, make_generator, sample_form):
        generator = make_generator(result=GeneratedImage())
        view = _run(GenerationContext(generator=generator), sample_form)

        assert view.status == STATUS_IMAGE_MISSING
        assert view.image_src is None
        assert view.button_disabled is False

    def test_previous_image_kept_on_failure(self, make_generator, sample_form):
        view = FormView()
        view.render_image("https://cdn.example/old.png")
        generator = make_generator(error=RuntimeError("boom"))

        _run(GenerationContext(generator=generator), sample_form, view)

        assert view.image_src == "https://cdn.example/old.png"
        assert view.status == "boom"


class TestInFlightGuard:
    """A disabled trigger control ignores further actions."""

    def test_disabled_view_is_ignored(self, generation_context, fake_generator, sample_form):
        view = FormView()
        view.set_loading(True)
        view.set_status("working")

        result = _run(generation_context, sample_form, view)

        assert result is view
        assert fake_generator.calls == []
        assert view.status == "working"
        assert view.button_disabled is True


class TestHandleSubmit:
    """Direct form submission shows a notice and does nothing else."""

    def test_submit_sets_placeholder_status(self):
        view = handle_submit()
        assert view.status == STATUS_SUBMIT_PLACEHOLDER
        assert view.image_src is None
        assert view.button_disabled is False

    def test_submit_reuses_view(self):
        view = FormView()
        assert handle_submit(view) is view

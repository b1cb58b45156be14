"""Image-generation collaborator for Logoforge.

The form controller only depends on the :class:`ImageGenerator` protocol: an
async ``generate(prompt, *, size)`` call that returns a
:class:`GeneratedImage`.  The production implementation,
:class:`OpenAIImageGenerator`, calls the OpenAI Images API.

Response Shape
--------------
The Images API answers with a ``data`` list whose first item carries either
an inline base64 payload (``b64_json``) or a remote address (``url``).
``gpt-image-1`` always returns ``b64_json``; older models may return a URL.
An empty ``data`` list produces an empty :class:`GeneratedImage`, which the
controller reports as a failed retrieval.

Errors
------
SDK errors (``openai.OpenAIError`` and subclasses) are not wrapped: their
``message`` text is what the user sees in the status area.  A missing
credential surfaces the same way, on the first call, because the SDK client
is created lazily.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from openai import AsyncOpenAI

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-image-1"
DEFAULT_SIZE = "1024x1024"

# Inline payloads are rendered as PNG data URLs.
_DATA_URL_PREFIX = "data:image/png;base64,"


class ImageGenerationError(Exception):
    """Raised when a generation call succeeds but yields no usable image."""

    pass


@dataclass(frozen=True)
class GeneratedImage:
    """Result of one generation call.

    Attributes:
        b64_json: Inline base64-encoded image payload, if returned.
        url: Remote image address, if returned.
        revised_prompt: Prompt as rewritten by the provider, if reported.
    """

    b64_json: str | None = None
    url: str | None = None
    revised_prompt: str | None = None

    def as_image_source(self) -> str | None:
        """Return a value usable as an ``<img>`` ``src``.

        The inline payload takes priority over the remote address.

        Returns:
            A ``data:`` URL, the remote URL, or ``None`` when the response
            carried neither.
        """
        if self.b64_json:
            return f"{_DATA_URL_PREFIX}{self.b64_json}"
        if self.url:
            return self.url
        return None


@runtime_checkable
class ImageGenerator(Protocol):
    """Protocol for image-generation backends."""

    async def generate(self, prompt: str, *, size: str = DEFAULT_SIZE) -> GeneratedImage:
        """Generate one image for ``prompt`` at the given output size."""
        ...


class OpenAIImageGenerator:
    """Image generation via OpenAI's Images API.

    Args:
        model: Model name (e.g. ``gpt-image-1``).
        api_key: API key.  ``None`` lets the SDK read ``OPENAI_API_KEY``.
        client: Pre-built ``AsyncOpenAI`` client; mainly for tests.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self.model = model
        self._api_key = api_key
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        """Create the AsyncOpenAI client on first use and reuse it afterwards."""
        if self._client is None:
            from openai import AsyncOpenAI

            self._client = AsyncOpenAI(api_key=self._api_key)
        return self._client

    async def close(self) -> None:
        """Close the underlying client if one was created."""
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def generate(self, prompt: str, *, size: str = DEFAULT_SIZE) -> GeneratedImage:
        """Generate a logo image.

        Args:
            prompt: Compiled instruction string.
            size: Output size descriptor (``WIDTHxHEIGHT``).

        Returns:
            The first image in the response, or an empty
            :class:`GeneratedImage` when the response has no data.

        Raises:
            openai.OpenAIError: On a missing credential or any API failure.
        """
        client = self._get_client()
        logger.debug(f"Requesting image (model={self.model}, size={size}, prompt_length={len(prompt)})")

        response = await client.images.generate(model=self.model, prompt=prompt, size=size)

        if not response.data:
            logger.warning("Image API returned an empty data list")
            return GeneratedImage()

        item = response.data[0]
        image = GeneratedImage(
            b64_json=getattr(item, "b64_json", None),
            url=getattr(item, "url", None),
            revised_prompt=getattr(item, "revised_prompt", None),
        )
        logger.info(
            f"Image generated (model={self.model}, inline={image.b64_json is not None}, "
            f"url={image.url is not None})"
        )
        return image

"""Logoforge - FastAPI Application.

This module is the single entry point for the web application.  It defines
the FastAPI ``app`` instance, all REST API routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
- **The HTML page** is served as a raw ``HTMLResponse``; the form options
  are fetched by the frontend via ``GET /api/config`` on page load.
- **Static assets** (CSS, JS) are served by FastAPI's ``StaticFiles``.
- **Generation** is delegated to :func:`~logoforge.core.controller.handle_generate`
  with a :class:`~logoforge.core.controller.GenerationContext` built once in
  the application lifespan and stored on ``app.state``.
- **Errors** never escalate past the status text: ``POST /api/generate``
  always answers 200 with the resulting view state.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/``                         Serve the logo form page
GET       ``/api/config``               Model, size, form options
POST      ``/api/generate``             Generate a reference logo
POST      ``/api/prompt/compile``       Preview the compiled prompt
POST      ``/api/submit``               Direct form submit (no-op notice)
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    logoforge

Direct invocation::

    python -m logoforge.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from logoforge import __version__
from logoforge.api.models import LogoFormRequest
from logoforge.core.config import LogoforgeConfig, config
from logoforge.core.controller import GenerationContext, handle_generate, handle_submit
from logoforge.core.image_client import OpenAIImageGenerator
from logoforge.core.prompt_builder import build_prompt_for_request
from logoforge.core.request import COLOR_OPTIONS, STYLE_OPTIONS, LogoType, normalize_form_fields

logger = logging.getLogger(__name__)

STATIC_DIR: Path = config.static_dir
TEMPLATES_DIR: Path = config.templates_dir


def build_context(cfg: LogoforgeConfig) -> GenerationContext:
    """Create the generation context from configuration.

    The credential is passed straight to the generator and never logged.

    Args:
        cfg: Loaded configuration.

    Returns:
        Context holding the OpenAI image generator and the output size.
    """
    generator = OpenAIImageGenerator(model=cfg.image_model, api_key=cfg.api_key_value())
    return GenerationContext(generator=generator, image_size=cfg.image_size)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown lifecycle.

    On startup:
        Builds the :class:`GenerationContext` and stores it on ``app.state``.
        The OpenAI client itself is created lazily on the first generation.

    On shutdown:
        Closes the generator built at startup, releasing its HTTP client.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    context = build_context(config)
    app.state.context = context
    logger.info(
        f"Generation context ready (model={config.image_model}, size={config.image_size}, "
        f"credential_configured={config.api_key_value() is not None})"
    )

    yield

    await context.generator.close()
    logger.info("Generation context closed")


app = FastAPI(
    title="Logoforge",
    description="Reference logo generation from a structured design brief.",
    version=__version__,
    lifespan=lifespan,
)

# Allow cross-origin requests so the page can be served from a different
# port during development.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


def _context(request: Request) -> GenerationContext:
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise HTTPException(status_code=503, detail="Generation context not initialised")
    return context


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the logo form page.

    Raises:
        HTTPException: 404 if ``index.html`` is not found.
    """
    index_path = TEMPLATES_DIR / "index.html"
    if index_path.exists():
        return HTMLResponse(content=index_path.read_text(encoding="utf-8"))
    raise HTTPException(status_code=404, detail="index.html not found")


@app.get("/api/config")
async def get_config() -> dict:
    """Return the configuration the form needs.

    Returns:
        Dictionary with keys ``version``, ``model``, ``image_size``,
        ``logo_types`` (``id`` + ``label``), ``style_options`` and
        ``color_options``.
    """
    return {
        "version": __version__,
        "model": config.image_model,
        "image_size": config.image_size,
        "logo_types": [{"id": lt.value, "label": lt.label} for lt in LogoType],
        "style_options": STYLE_OPTIONS,
        "color_options": COLOR_OPTIONS,
    }


@app.post("/api/generate")
async def generate_logo(req: LogoFormRequest, request: Request) -> dict:
    """Generate a reference logo from the submitted form.

    Validation and generation failures are reported in ``status``; the
    response is 200 either way.

    Args:
        req: Current form values.
        request: Incoming request (used to reach ``app.state``).

    Returns:
        The view state (``status``, ``button_label``, ``button_disabled``,
        ``image_src``, ``placeholder_visible``, ``prompt``) plus a
        ``success`` flag.
    """
    view = await handle_generate(_context(request), req.to_form_fields())
    return {"success": view.image_src is not None, **view.to_dict()}


@app.post("/api/prompt/compile")
async def compile_prompt(req: LogoFormRequest) -> dict:
    """Preview the compiled prompt without generating an image.

    Returns:
        Dictionary with a single ``compiled_prompt`` key.
    """
    generation_request = normalize_form_fields(req.to_form_fields())
    return {"compiled_prompt": build_prompt_for_request(generation_request)}


@app.post("/api/submit")
async def submit_form() -> dict:
    """Handle a direct form submission.  Nothing is stored."""
    return handle_submit().to_dict()


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~logoforge.core.config.config`
    (``LOGOFORGE_SERVER_HOST``, ``LOGOFORGE_SERVER_PORT``,
    ``LOGOFORGE_LOG_LEVEL``).  Defaults to ``0.0.0.0:7860``.
    """
    import uvicorn

    uvicorn.run(
        "logoforge.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level,
        reload=False,
    )


if __name__ == "__main__":
    main()

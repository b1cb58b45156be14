"""Prompt compilation for the reference logo generator.

The prompt is a fixed sequence of ten clauses joined by single spaces.
Every clause is always present: when the user leaves an optional field
blank, a fixed fallback sentence takes its place, so the image model always
receives the same shape of instruction.

Clause Order
------------
::

    1.  [Fixed: logo-only instruction]
    2.  Organization name: <organization>.
    3.  Logo type: <text only | icon only | text and icon>.
    4.  Industry: <industry>.                 | Industry not specified.
    5.  Style direction: <a, b>.              | No style direction selected.
    6.  Preferred colors: <a, b>.             | No preferred colors selected.
    7.  Reference links: <references>.        | No reference links provided.
    8.  Reference notes: <notes>.             | No reference notes provided.
    9.  Additional preferences: <wishes>.     | No additional preferences.
    10. [Fixed: closing instruction]

Usage
-----
::

    compiled = build_prompt(
        organization="Acme",
        logo_type="icon",
        industry="",
        styles=[],
        colors=[],
        references="",
        reference_notes="",
        wishes="",
    )
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .request import GenerationRequest, LogoType

# ---------------------------------------------------------------------------
# Fixed instructions that open and close every prompt.
# ---------------------------------------------------------------------------

_OPENING_INSTRUCTION = "Create ONLY a logo (no mockups, no background, no 3D scenes)."
_CLOSING_INSTRUCTION = "The result must be just the logo."

# ---------------------------------------------------------------------------
# Fallback clauses for optional fields left blank.
# ---------------------------------------------------------------------------

_NO_INDUSTRY = "Industry not specified."
_NO_STYLES = "No style direction selected."
_NO_COLORS = "No preferred colors selected."
_NO_REFERENCES = "No reference links provided."
_NO_REFERENCE_NOTES = "No reference notes provided."
_NO_WISHES = "No additional preferences."

TAG_SEPARATOR = ", "
CLAUSE_SEPARATOR = " "


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _join_tags(tags: Iterable[Any] | str | None) -> str:
    if tags is None:
        return ""
    if isinstance(tags, str):
        tags = [tags]
    cleaned = (_clean(tag) for tag in tags)
    return TAG_SEPARATOR.join(tag for tag in cleaned if tag)


def _clause(label: str, value: str, fallback: str) -> str:
    if value:
        return f"{label}: {value}."
    return fallback


def build_prompt(
    organization: str,
    logo_type: LogoType | str,
    industry: str,
    styles: Iterable[str],
    colors: Iterable[str],
    references: str,
    reference_notes: str,
    wishes: str,
) -> str:
    """Compile the full logo prompt from the brief's fields.

    The function is pure: it performs no I/O, never mutates ``styles`` or
    ``colors``, and returns the same string for the same input.  It has no
    error conditions; unrecognized logo types are treated as text only.

    Args:
        organization: Organization name.  Trimmed before use.
        logo_type: A :class:`LogoType` or its wire value.
        industry: Industry description, or blank.
        styles: Style tags in selection order, joined with ``", "``.
        colors: Color tags in selection order, joined with ``", "``.
        references: Reference links, or blank.
        reference_notes: Notes about the references, or blank.
        wishes: Additional preferences, or blank.

    Returns:
        Ten clauses joined by single spaces.
    """
    clauses = [
        _OPENING_INSTRUCTION,
        f"Organization name: {_clean(organization)}.",
        f"Logo type: {LogoType.parse(logo_type).label}.",
        _clause("Industry", _clean(industry), _NO_INDUSTRY),
        _clause("Style direction", _join_tags(styles), _NO_STYLES),
        _clause("Preferred colors", _join_tags(colors), _NO_COLORS),
        _clause("Reference links", _clean(references), _NO_REFERENCES),
        _clause("Reference notes", _clean(reference_notes), _NO_REFERENCE_NOTES),
        _clause("Additional preferences", _clean(wishes), _NO_WISHES),
        _CLOSING_INSTRUCTION,
    ]
    return CLAUSE_SEPARATOR.join(clauses)


def build_prompt_for_request(request: GenerationRequest) -> str:
    """Compile the prompt for a normalized :class:`GenerationRequest`."""
    return build_prompt(
        request.organization,
        request.logo_type,
        request.industry,
        request.styles,
        request.colors,
        request.references,
        request.reference_notes,
        request.wishes,
    )

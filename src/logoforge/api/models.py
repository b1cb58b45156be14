"""Pydantic request models for the Logoforge API.

The browser posts the logo form as JSON using the form's own field names
(``logoType``, ``referenceNotes``, ``style`` ...).  Snake-case names are
accepted as well so the API is comfortable to call from scripts.

Validation here is deliberately loose: every field is optional and blank
values are allowed.  The only business rule, a non-blank organization
name, is enforced by :mod:`logoforge.core.validation` so that it can be
reported through the status text like every other failure.

Models
------
LogoFormRequest
    Payload for ``POST /api/generate`` and ``POST /api/prompt/compile``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogoFormRequest(BaseModel):
    """Request body carrying the current state of the logo form.

    Attributes:
        organization: Organization name (required by validation, not by
            the schema).
        logo_type: ``"text"``, ``"icon"`` or ``"text-icon"``; anything else
            is treated as ``"text"``.
        industry: Optional industry description.
        styles: Selected style tags, in selection order.
        colors: Selected color tags, in selection order.
        references: Optional reference links.
        reference_notes: Optional notes about the references.
        wishes: Optional free-text preferences.
    """

    model_config = ConfigDict(populate_by_name=True)

    organization: str | None = Field(
        default=None,
        description="Organization name.",
    )
    logo_type: str | None = Field(
        default="text",
        alias="logoType",
        description="Logo type: 'text', 'icon' or 'text-icon'.",
    )
    industry: str | None = Field(
        default=None,
        description="Industry the organization works in.",
    )
    styles: list[str] = Field(
        default_factory=list,
        alias="style",
        description="Selected style tags, in selection order.",
    )
    colors: list[str] = Field(
        default_factory=list,
        description="Selected color tags, in selection order.",
    )
    references: str | None = Field(
        default=None,
        description="Reference links (free text).",
    )
    reference_notes: str | None = Field(
        default=None,
        alias="referenceNotes",
        description="Notes about the reference links.",
    )
    wishes: str | None = Field(
        default=None,
        description="Additional preferences (free text).",
    )

    @field_validator("styles", "colors", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        # A single checked box arrives as a plain string from some clients.
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    def to_form_fields(self) -> dict[str, Any]:
        """Return the payload keyed by the form's DOM field names."""
        return self.model_dump(by_alias=True)

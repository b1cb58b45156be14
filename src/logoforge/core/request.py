"""Structured generation request and form-field normalization.

The browser form posts loosely typed values: any field may be missing,
``None``, padded with whitespace, or (for the multi-select fields) either a
single string or a list.  :func:`normalize_form_fields` turns that raw
payload into a :class:`GenerationRequest` with every fallback rule applied
in one place:

- absent or ``None`` scalar fields become ``""``
- every scalar is coerced to ``str`` and trimmed
- multi-valued fields (``style``, ``colors``) accept a list, a tuple or a
  single string; each value is coerced to ``str`` and trimmed, blank values
  are dropped, and selection order is preserved
- ``logoType`` falls back to :attr:`LogoType.TEXT` on any unrecognized value

Normalization never raises.  Rejecting a blank organization name is the
job of :mod:`logoforge.core.validation`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# DOM field names used by the form in ``templates/index.html``.
FIELD_ORGANIZATION = "organization"
FIELD_LOGO_TYPE = "logoType"
FIELD_INDUSTRY = "industry"
FIELD_STYLE = "style"
FIELD_COLORS = "colors"
FIELD_REFERENCES = "references"
FIELD_REFERENCE_NOTES = "referenceNotes"
FIELD_WISHES = "wishes"


class LogoType(str, Enum):
    """Closed set of logo types offered by the form."""

    TEXT = "text"
    ICON = "icon"
    TEXT_ICON = "text-icon"

    @property
    def label(self) -> str:
        """Human-readable label used inside the prompt."""
        return _LOGO_TYPE_LABELS[self]

    @classmethod
    def parse(cls, value: Any) -> LogoType:
        """Map any input onto a logo type, defaulting to text only.

        Args:
            value: A ``LogoType``, its wire value (``"text"``, ``"icon"``,
                ``"text-icon"``), or anything else.

        Returns:
            The matching ``LogoType``; :attr:`TEXT` for unrecognized input.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            return cls.TEXT


_LOGO_TYPE_LABELS: dict[LogoType, str] = {
    LogoType.TEXT: "text only",
    LogoType.ICON: "icon only",
    LogoType.TEXT_ICON: "text and icon",
}


@dataclass(frozen=True)
class GenerationRequest:
    """One logo brief, built fresh for each generate action.

    Attributes:
        organization: Trimmed organization name.  Required; a blank value is
            rejected by validation before any prompt is built.
        logo_type: Requested logo type.
        industry: Optional industry description.
        styles: Selected style tags in selection order.
        colors: Selected color tags in selection order.
        references: Optional reference links (free text, not validated).
        reference_notes: Optional notes about the references.
        wishes: Optional free-text preferences.
    """

    organization: str
    logo_type: LogoType = LogoType.TEXT
    industry: str = ""
    styles: tuple[str, ...] = ()
    colors: tuple[str, ...] = ()
    references: str = ""
    reference_notes: str = ""
    wishes: str = ""


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _tags(fields: Mapping[str, Any], name: str) -> tuple[str, ...]:
    # Multi-dicts (starlette FormData, werkzeug MultiDict) keep repeated keys
    # behind getlist(); plain mappings carry a list or a single value.
    getlist = getattr(fields, "getlist", None)
    if callable(getlist):
        raw = getlist(name)
    else:
        raw = fields.get(name)

    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        raw = [raw]

    tags = (_text(item) for item in raw)
    return tuple(tag for tag in tags if tag)


def normalize_form_fields(fields: Mapping[str, Any] | None) -> GenerationRequest:
    """Build a :class:`GenerationRequest` from raw form values.

    Args:
        fields: Mapping keyed by the DOM field names (``organization``,
            ``logoType``, ``industry``, ``style``, ``colors``,
            ``references``, ``referenceNotes``, ``wishes``).  Missing keys
            are allowed.

    Returns:
        The normalized request.  See the module docstring for the rules.
    """
    fields = fields or {}
    return GenerationRequest(
        organization=_text(fields.get(FIELD_ORGANIZATION)),
        logo_type=LogoType.parse(fields.get(FIELD_LOGO_TYPE, LogoType.TEXT.value)),
        industry=_text(fields.get(FIELD_INDUSTRY)),
        styles=_tags(fields, FIELD_STYLE),
        colors=_tags(fields, FIELD_COLORS),
        references=_text(fields.get(FIELD_REFERENCES)),
        reference_notes=_text(fields.get(FIELD_REFERENCE_NOTES)),
        wishes=_text(fields.get(FIELD_WISHES)),
    )


# Constants for the form
STYLE_OPTIONS = [
    "minimalist",
    "geometric",
    "modern",
    "classic",
    "playful",
    "elegant",
    "bold",
    "hand-drawn",
    "vintage",
    "corporate",
]

COLOR_OPTIONS = [
    "black",
    "white",
    "gray",
    "blue",
    "green",
    "red",
    "orange",
    "yellow",
    "purple",
    "pink",
    "gold",
]

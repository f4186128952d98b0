"""
Request Validator Step

Turns a decoded request into a normalized EmailRequest.

Accepts either a plain mapping (camelCase keys as sent by the web client,
or snake_case keys) or any object exposing the same attributes, such as the
API request schema.
"""

from typing import Any, Mapping, Optional

import logfire

from pipeline.core.exceptions import ValidationError, ValidationErrorCode
from pipeline.models.core import (
    DEFAULT_LANGUAGE,
    DEFAULT_LENGTH,
    DEFAULT_TONE,
    EmailRequest,
)

# field name -> accepted input keys, in lookup order
FIELD_ALIASES = {
    "recipient_name": ("recipientName", "recipient_name"),
    "subject": ("subject",),
    "purpose": ("purpose",),
    "tone": ("tone",),
    "personal_note": ("personalNote", "personal_note"),
    "length": ("length",),
    "language": ("language",),
}


def _read_field(raw: Any, field_name: str, strip: bool = True) -> Optional[str]:
    """
    Read a field by any of its aliases.

    Blank values count as missing. Values are returned stripped unless
    strip is False, in which case the caller's text is kept as sent.
    """
    for key in FIELD_ALIASES[field_name]:
        if isinstance(raw, Mapping):
            value = raw.get(key)
        else:
            value = getattr(raw, key, None)

        if value is None:
            continue

        text = str(value)
        if text.strip():
            return text.strip() if strip else text

    return None


def validate_request(raw: Any) -> EmailRequest:
    """
    Validate and normalize an incoming email request.

    Rules:
    - subject or purpose must be non-empty (subject wins when both are set)
    - tone, length and language fall back to defaults when absent
    - length is lower-cased; unknown values are kept and treated as medium
      downstream
    - personal_note and recipient_name are optional free text; the note is
      kept exactly as sent

    Args:
        raw: Decoded request (mapping or object with matching attributes)

    Returns:
        EmailRequest ready for the pipeline

    Raises:
        ValidationError: MISSING_SUBJECT when both subject and purpose are empty
    """
    subject = _read_field(raw, "subject")
    purpose = _read_field(raw, "purpose")

    if not subject and not purpose:
        logfire.warning("Email request rejected", reason=ValidationErrorCode.MISSING_SUBJECT.value)
        raise ValidationError(ValidationErrorCode.MISSING_SUBJECT)

    length = _read_field(raw, "length")

    return EmailRequest(
        subject=subject or purpose,
        recipient_name=_read_field(raw, "recipient_name"),
        purpose=purpose,
        tone=_read_field(raw, "tone") or DEFAULT_TONE,
        personal_note=_read_field(raw, "personal_note", strip=False),
        length=length.lower() if length else DEFAULT_LENGTH,
        language=_read_field(raw, "language") or DEFAULT_LANGUAGE,
    )

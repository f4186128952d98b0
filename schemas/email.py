"""
Pydantic schemas for the email generation endpoint.

Field names follow the web client's camelCase JSON; snake_case names are
accepted as well.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ===================================================================
# REQUEST SCHEMAS
# ===================================================================

class GenerateEmailRequest(BaseModel):
    """
    Request body for POST /generate-email

    Only subject or purpose is required, and that rule is enforced by the
    pipeline's request validator so the error message matches other clients.
    Numbers and booleans are read as text and values of any other shape are
    treated as absent, so an odd optional field falls back to its default
    instead of rejecting the request.
    """

    recipient_name: Optional[str] = Field(None, description="Recipient display name")
    subject: Optional[str] = Field(None, description="Email subject")
    purpose: Optional[str] = Field(None, description="Purpose, used when subject is empty")
    tone: Optional[str] = Field(None, description="Tone tag, e.g. Professional, casual, friendly")
    personal_note: Optional[str] = Field(None, description="Free text included verbatim")
    length: Optional[str] = Field(None, description="short, medium or long")
    language: Optional[str] = Field(None, description="Language code, e.g. en, hi, es")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "recipientName": "Priya",
                "subject": "Project Update",
                "tone": "casual",
                "personalNote": "The demo moved to Thursday.",
                "length": "short",
                "language": "en"
            }
        }
    )

    @field_validator("*", mode="before")
    @classmethod
    def coerce_scalar_to_text(cls, v: Any) -> Optional[str]:
        """Read scalars as text; anything else counts as not provided."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (bool, int, float)):
            return str(v)
        return None


# ===================================================================
# RESPONSE SCHEMAS
# ===================================================================

class EmailMetadataResponse(BaseModel):
    """Metadata describing how the email was produced."""

    language: str
    tone: str
    length: str
    generated_at: datetime = Field(serialization_alias="generatedAt")
    note: Optional[str] = None
    diagnostics: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(
        from_attributes=True,  # Built directly from the pipeline's ResultMetadata
    )


class GenerateEmailResponse(BaseModel):
    """
    Response from POST /generate-email

    Identical shape for generated and fallback emails.
    """

    success: bool = True
    email: str = Field(..., description="Complete email text, starting with the subject line")
    source: str = Field(..., description="generated or fallback")
    metadata: EmailMetadataResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "email": "Subject: Project Update\n\nHey there,\n\n...",
                "source": "fallback",
                "metadata": {
                    "language": "en",
                    "tone": "casual",
                    "length": "short",
                    "generatedAt": "2025-01-13T10:30:00Z",
                    "note": "Fallback email"
                }
            }
        }
    )


class ErrorResponse(BaseModel):
    """Body returned when a request is rejected."""

    success: bool = False
    error: str

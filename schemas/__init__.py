"""
Pydantic schemas for request/response validation.
"""

from schemas.email import (
    EmailMetadataResponse,
    ErrorResponse,
    GenerateEmailRequest,
    GenerateEmailResponse,
)

__all__ = [
    "EmailMetadataResponse",
    "ErrorResponse",
    "GenerateEmailRequest",
    "GenerateEmailResponse",
]

"""
Custom exceptions for pipeline execution.

Only request validation is allowed to stop the pipeline. Generation
failures are represented as GenerationFailure values and absorbed by the
fallback path, so they never surface as exceptions here.
"""

from enum import Enum


class PipelineExecutionError(Exception):
    """
    Base exception for pipeline execution failures.

    All pipeline-specific exceptions inherit from this.
    """
    pass


class ValidationErrorCode(str, Enum):
    """Machine-readable validation failure reasons."""
    MISSING_SUBJECT = "missing_subject"


VALIDATION_MESSAGES = {
    ValidationErrorCode.MISSING_SUBJECT: "Email subject or purpose is required",
}


class ValidationError(PipelineExecutionError):
    """
    Raised when an incoming request cannot be used by the pipeline.

    Attributes:
        code: Which validation rule failed

    The message is safe to return to API callers.
    """

    def __init__(self, code: ValidationErrorCode, message: str | None = None):
        self.code = code
        super().__init__(message or VALIDATION_MESSAGES[code])

"""
Models package for Pipeline models

NOTE: plain in-memory dataclasses, nothing here is persisted
"""

from .core import (
    # Enums
    EmailSource,
    FailureKind,

    # Core data models
    EmailRequest,
    GenerationParameters,
    CompiledPrompt,
    GenerationServiceConfig,
    GenerationSuccess,
    GenerationFailure,
    GenerationOutcome,
    ResultMetadata,
    EmailResult,
    StepTimings,
)

__all__ = [
    # Enums
    "EmailSource",
    "FailureKind",

    # Core data models
    "EmailRequest",
    "GenerationParameters",
    "CompiledPrompt",
    "GenerationServiceConfig",
    "GenerationSuccess",
    "GenerationFailure",
    "GenerationOutcome",
    "ResultMetadata",
    "EmailResult",
    "StepTimings",
]

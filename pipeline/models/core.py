"""Core data models for the email generation pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union
from datetime import datetime, timezone


DEFAULT_TONE = "Professional"
DEFAULT_LENGTH = "medium"
DEFAULT_LANGUAGE = "en"

# Values shipped in example .env files; treated the same as a missing key.
PLACEHOLDER_API_KEYS = frozenset({
    "your_gemini_api_key_here",
    "your_api_key_here",
    "changeme",
})


class EmailSource(str, Enum):
    """Which pipeline branch produced the email text."""
    GENERATED = "generated"
    FALLBACK = "fallback"


class FailureKind(str, Enum):
    """Classified reasons a generation call did not produce usable text."""
    UNCONFIGURED = "unconfigured"
    TIMEOUT = "timeout"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class EmailRequest:
    """
    Normalized email request. Built by the request validator, never mutated.

    `subject` is always non-empty: it holds the caller's subject, or the
    purpose when no subject was given.
    """

    subject: str
    """Resolved subject line (subject, else purpose)"""

    recipient_name: Optional[str] = None
    """Display name of the recipient; a localized placeholder is used when absent"""

    purpose: Optional[str] = None
    """Purpose as sent by the caller, kept for logging"""

    tone: str = DEFAULT_TONE
    """Free-form tone tag (e.g. 'Professional', 'casual', 'friendly')"""

    personal_note: Optional[str] = None
    """Inserted verbatim into prompts and fallback emails"""

    length: str = DEFAULT_LENGTH
    """Length tier: short, medium or long (unknown tiers behave like medium)"""

    language: str = DEFAULT_LANGUAGE
    """Language code; unknown codes are passed through to the prompt"""


@dataclass(frozen=True)
class GenerationParameters:
    """Sampling parameters sent with every generation call."""

    temperature: float
    top_p: float
    max_output_tokens: int


@dataclass(frozen=True)
class CompiledPrompt:
    """Instruction text plus generation parameters for one request."""

    instruction_text: str
    parameters: GenerationParameters


@dataclass(frozen=True)
class GenerationServiceConfig:
    """
    Generation service configuration, built once from settings and handed
    to the GenerationClient at construction.
    """

    api_key: str = ""
    model_name: str = "gemini-2.0-flash"
    timeout_seconds: float = 30.0

    @property
    def is_configured(self) -> bool:
        """True when the API key is present and not a placeholder value."""
        key = (self.api_key or "").strip()
        return bool(key) and key.lower() not in PLACEHOLDER_API_KEYS


# ===================================================================
# GENERATION OUTCOME
# ===================================================================

@dataclass(frozen=True)
class GenerationSuccess:
    """The generation service returned well-formed text."""

    text: str


@dataclass(frozen=True)
class GenerationFailure:
    """
    The generation service could not be used for this request.

    `detail` is for operators (logs, optional diagnostics) and is never
    returned to callers by default.
    """

    kind: FailureKind
    detail: Optional[str] = None


GenerationOutcome = Union[GenerationSuccess, GenerationFailure]


# ===================================================================
# EMAIL RESULT
# ===================================================================

@dataclass(frozen=True)
class ResultMetadata:
    """Descriptive metadata attached to every EmailResult."""

    language: str
    tone: str
    length: str
    generated_at: datetime
    note: Optional[str] = None
    diagnostics: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class EmailResult:
    """Final pipeline output. Same shape for generated and fallback emails."""

    text: str
    source: EmailSource
    metadata: ResultMetadata

    @property
    def is_fallback(self) -> bool:
        return self.source is EmailSource.FALLBACK


@dataclass
class StepTimings:
    """Per-request timing record, logged to logfire at the end of a run."""

    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    durations: Dict[str, float] = field(default_factory=dict)

    def add(self, step_name: str, duration: float) -> None:
        """Record step timing"""
        self.durations[step_name] = duration

    def total_duration(self) -> float:
        """Calculate total pipeline execution time in seconds"""
        return (datetime.now(timezone.utc) - self.started_at).total_seconds()

"""
Result Assembler Step

The single point where the generated and fallback branches reconverge.
Callers always receive the same EmailResult shape; only `source` and
`metadata.note` (plus optional diagnostics) differ.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

import logfire

from pipeline.models.core import (
    EmailRequest,
    EmailResult,
    EmailSource,
    FailureKind,
    GenerationFailure,
    GenerationOutcome,
    GenerationSuccess,
    ResultMetadata,
)
from pipeline.steps.fallback_synthesizer import FallbackSkeleton, synthesize_fallback

UNCONFIGURED_NOTE = "Fallback email"
FAILURE_NOTE = "Generated using fallback method"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResultAssembler:
    """
    Builds EmailResult objects from generation outcomes.

    Args:
        clock: Returns the generation timestamp (injectable for tests)
        include_diagnostics: Copy failure kind/detail into metadata.diagnostics.
            Meant for non-production use only.
        humanizer: Optional skeleton transform applied to fallback emails
            (e.g. a seeded Humanizer); the personal note is never passed to it
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        include_diagnostics: bool = False,
        humanizer: Optional[Callable[[FallbackSkeleton, str], FallbackSkeleton]] = None,
    ):
        self.clock = clock
        self.include_diagnostics = include_diagnostics
        self.humanizer = humanizer

    def assemble(self, outcome: GenerationOutcome, request: EmailRequest) -> EmailResult:
        if isinstance(outcome, GenerationSuccess):
            return EmailResult(
                text=outcome.text,
                source=EmailSource.GENERATED,
                metadata=self._metadata(request),
            )

        return self.fallback(request, outcome)

    def fallback(self, request: EmailRequest, failure: GenerationFailure) -> EmailResult:
        text = synthesize_fallback(request, humanizer=self.humanizer)

        note = UNCONFIGURED_NOTE if failure.kind is FailureKind.UNCONFIGURED else FAILURE_NOTE

        diagnostics = None
        if self.include_diagnostics:
            diagnostics = {"failure_kind": failure.kind.value, "detail": failure.detail}

        logfire.info(
            "Using fallback email",
            failure_kind=failure.kind.value,
            language=request.language,
            tone=request.tone,
        )

        return EmailResult(
            text=text,
            source=EmailSource.FALLBACK,
            metadata=self._metadata(request, note=note, diagnostics=diagnostics),
        )

    def _metadata(self, request: EmailRequest, note=None, diagnostics=None) -> ResultMetadata:
        return ResultMetadata(
            language=request.language,
            tone=request.tone,
            length=request.length,
            generated_at=self.clock(),
            note=note,
            diagnostics=diagnostics,
        )

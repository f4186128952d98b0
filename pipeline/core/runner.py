"""
Core pipeline infrastructure - the generation-with-fallback runner.

EmailPipelineRunner: validate -> compile -> generate -> assemble, with every
generation failure routed to the fallback synthesizer.
"""

import time
from typing import Any

import logfire

from pipeline.models.core import EmailResult, StepTimings
from pipeline.steps.generation_client import GenerationClient
from pipeline.steps.prompt_compiler import compile_prompt
from pipeline.steps.request_validator import validate_request
from pipeline.steps.result_assembler import ResultAssembler
from pipeline.tables import DEFAULT_TABLES, ConfigurationTables


class EmailPipelineRunner:
    """
    Orchestrates one email generation request.

    Responsibilities:
    - Validate the incoming request (the only error surfaced to callers)
    - Compile the prompt and call the generation service once
    - Fall back to template emails on any generation failure
    - Log step timings and the final source

    The runner holds only read-only collaborators, so a single instance is
    safe to share between concurrent requests.
    """

    def __init__(
        self,
        client: GenerationClient,
        assembler: ResultAssembler,
        tables: ConfigurationTables = DEFAULT_TABLES,
    ):
        """
        Initialize pipeline runner.

        Args:
            client: Generation client (carries the service configuration)
            assembler: Result assembler (clock, diagnostics, fallback decorator)
            tables: Length/language tables used by the prompt compiler
        """
        self.client = client
        self.assembler = assembler
        self.tables = tables

    async def run(self, raw_request: Any) -> EmailResult:
        """
        Run the pipeline for one request.

        Args:
            raw_request: Decoded request (mapping or request schema)

        Returns:
            EmailResult tagged GENERATED or FALLBACK

        Raises:
            ValidationError: If neither subject nor purpose is provided
        """
        timings = StepTimings()

        with logfire.span("pipeline.generate_email"):
            start = time.perf_counter()
            request = validate_request(raw_request)
            timings.add("request_validator", time.perf_counter() - start)

            logfire.info(
                "Email generation request received",
                language=request.language,
                tone=request.tone,
                length=request.length,
                has_recipient=request.recipient_name is not None,
                has_personal_note=request.personal_note is not None,
            )

            start = time.perf_counter()
            compiled = compile_prompt(request, self.tables)
            timings.add("prompt_compiler", time.perf_counter() - start)

            start = time.perf_counter()
            outcome = await self.client.generate(compiled)
            timings.add("generation_client", time.perf_counter() - start)

            result = self.assembler.assemble(outcome, request)

            logfire.info(
                "Email generation completed",
                source=result.source.value,
                total_duration=timings.total_duration(),
                step_timings=timings.durations,
            )

            return result

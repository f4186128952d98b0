"""
Generation Client Step

Calls the external generation service once, under a timeout, and classifies
the result into a GenerationOutcome. Failures are returned as values and
never raised; the pipeline turns them into fallback emails.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional

import httpx
import logfire
from pydantic_ai.exceptions import ModelHTTPError, UnexpectedModelBehavior
from pydantic_ai.models import Model

from pipeline.models.core import (
    CompiledPrompt,
    FailureKind,
    GenerationFailure,
    GenerationOutcome,
    GenerationParameters,
    GenerationServiceConfig,
    GenerationSuccess,
)
from utils.llm_agent import create_gemini_model, run_agent

# (instruction_text, parameters) -> generated text
GenerationBackend = Callable[[str, GenerationParameters], Awaitable[Any]]


class GeminiBackend:
    """
    Default backend: a pydantic-ai agent on Google Gemini.

    The model is built lazily on the first call so that constructing the
    backend never touches credentials or the network. A prebuilt pydantic-ai
    model can be passed instead (used by tests).
    """

    def __init__(self, config: GenerationServiceConfig, model: Optional[Model] = None):
        self.config = config
        self._model = model

    def _get_model(self) -> Model:
        if self._model is None:
            self._model = create_gemini_model(self.config.model_name, self.config.api_key)
        return self._model

    async def __call__(self, instruction_text: str, parameters: GenerationParameters) -> Any:
        return await run_agent(
            prompt=instruction_text,
            model=self._get_model(),
            temperature=parameters.temperature,
            top_p=parameters.top_p,
            max_tokens=parameters.max_output_tokens,
            retries=0,
            timeout=self.config.timeout_seconds,
        )


class GenerationClient:
    """
    Wraps a generation backend with configuration checks, a timeout and
    failure classification.

    At most one backend call is made per generate() call. There is no retry:
    any failure goes straight to the fallback path.
    """

    def __init__(
        self,
        config: GenerationServiceConfig,
        backend: Optional[GenerationBackend] = None,
    ):
        """
        Args:
            config: Credential, model name and timeout
            backend: Callable used to reach the service (defaults to GeminiBackend)
        """
        self.config = config
        self.backend = backend or GeminiBackend(config)

    async def generate(self, compiled_prompt: CompiledPrompt) -> GenerationOutcome:
        """
        Generate email text for a compiled prompt.

        Returns:
            GenerationSuccess with the raw service text, or GenerationFailure:
            - UNCONFIGURED: no usable API key, no call attempted
            - TIMEOUT: call exceeded config.timeout_seconds
            - TRANSPORT_ERROR: HTTP/network/provider error
            - MALFORMED_RESPONSE: response without usable text
        """
        if not self.config.is_configured:
            logfire.info("Generation service not configured, skipping call")
            return GenerationFailure(FailureKind.UNCONFIGURED, "API key missing or placeholder")

        with logfire.span(
            "generation_client.generate",
            model=self.config.model_name,
            timeout=self.config.timeout_seconds,
            max_output_tokens=compiled_prompt.parameters.max_output_tokens,
        ):
            try:
                output = await asyncio.wait_for(
                    self.backend(compiled_prompt.instruction_text, compiled_prompt.parameters),
                    timeout=self.config.timeout_seconds,
                )
            except (asyncio.TimeoutError, httpx.TimeoutException) as e:
                return self._failure(FailureKind.TIMEOUT, f"No response within {self.config.timeout_seconds}s", e)
            except UnexpectedModelBehavior as e:
                return self._failure(FailureKind.MALFORMED_RESPONSE, str(e), e)
            except ModelHTTPError as e:
                return self._failure(FailureKind.TRANSPORT_ERROR, f"HTTP {e.status_code}: {e}", e)
            except Exception as e:
                return self._failure(FailureKind.TRANSPORT_ERROR, f"{type(e).__name__}: {e}", e)

            if not isinstance(output, str) or not output.strip():
                return self._failure(
                    FailureKind.MALFORMED_RESPONSE,
                    f"Expected non-empty text, got {type(output).__name__}",
                )

            logfire.info(
                "Email generated",
                model=self.config.model_name,
                length=len(output),
                word_count=len(output.split()),
            )
            return GenerationSuccess(output)

    def _failure(
        self,
        kind: FailureKind,
        detail: str,
        error: Optional[BaseException] = None,
    ) -> GenerationFailure:
        logfire.error(
            "Email generation failed",
            failure_kind=kind.value,
            error=detail,
            error_type=type(error).__name__ if error else None,
            model=self.config.model_name,
            _exc_info=error if error is not None else False,
        )
        return GenerationFailure(kind, detail)

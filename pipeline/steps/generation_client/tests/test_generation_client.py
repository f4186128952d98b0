"""
Test suite for the Generation Client step.

The generation service is replaced by fake backends, and by a pydantic-ai
FunctionModel for the default Gemini backend, so no network access happens.

Run with:
    pytest pipeline/steps/generation_client/tests/test_generation_client.py -v
"""

import asyncio

import httpx
import logfire
import pytest
from pydantic_ai.exceptions import ModelHTTPError, UnexpectedModelBehavior
from pydantic_ai.messages import ModelMessage, ModelResponse, TextPart
from pydantic_ai.models.function import AgentInfo, FunctionModel

from pipeline.models.core import (
    CompiledPrompt,
    FailureKind,
    GenerationFailure,
    GenerationParameters,
    GenerationServiceConfig,
    GenerationSuccess,
)
from pipeline.steps.generation_client import GeminiBackend, GenerationClient


# ===================================================================
# FIXTURES
# ===================================================================

@pytest.fixture
def compiled_prompt():
    return CompiledPrompt(
        instruction_text="Write a brief email.\nSubject: Project Update",
        parameters=GenerationParameters(temperature=0.9, top_p=0.95, max_output_tokens=400),
    )


@pytest.fixture
def configured():
    return GenerationServiceConfig(api_key="test-key", model_name="gemini-test", timeout_seconds=1.0)


class RecordingBackend:
    """Fake backend that records calls and returns or raises a fixed value."""

    def __init__(self, result=None, error=None, delay: float = 0.0):
        self.result = result
        self.error = error
        self.delay = delay
        self.calls = []

    async def __call__(self, instruction_text, parameters):
        self.calls.append((instruction_text, parameters))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


# ===================================================================
# TESTS - Configuration short-circuit
# ===================================================================

@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("api_key", ["", "   ", "your_gemini_api_key_here", "YOUR_GEMINI_API_KEY_HERE"])
async def test_unconfigured_key_skips_backend(compiled_prompt, api_key):
    backend = RecordingBackend(result="should not be used")
    client = GenerationClient(GenerationServiceConfig(api_key=api_key), backend=backend)

    outcome = await client.generate(compiled_prompt)

    assert isinstance(outcome, GenerationFailure)
    assert outcome.kind is FailureKind.UNCONFIGURED
    assert backend.calls == []


# ===================================================================
# TESTS - Success path
# ===================================================================

@pytest.mark.unit
@pytest.mark.asyncio
async def test_success_passes_text_through_unmodified(compiled_prompt, configured):
    raw_text = "Subject: Project Update\n\n  Hey Priya,\n\nQuick update...\n\nThanks,\nSam  \n"
    backend = RecordingBackend(result=raw_text)
    client = GenerationClient(configured, backend=backend)

    outcome = await client.generate(compiled_prompt)

    assert outcome == GenerationSuccess(raw_text)
    assert backend.calls == [(compiled_prompt.instruction_text, compiled_prompt.parameters)]


# ===================================================================
# TESTS - Failure classification
# ===================================================================

@pytest.mark.unit
@pytest.mark.asyncio
async def test_slow_backend_times_out(compiled_prompt):
    config = GenerationServiceConfig(api_key="test-key", timeout_seconds=0.05)
    backend = RecordingBackend(result="too late", delay=1.0)
    client = GenerationClient(config, backend=backend)

    outcome = await client.generate(compiled_prompt)

    assert outcome.kind is FailureKind.TIMEOUT
    assert len(backend.calls) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_http_client_timeout_is_classified_as_timeout(compiled_prompt, configured):
    backend = RecordingBackend(error=httpx.ReadTimeout("read timed out"))
    client = GenerationClient(configured, backend=backend)

    outcome = await client.generate(compiled_prompt)

    assert outcome.kind is FailureKind.TIMEOUT


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        ModelHTTPError(status_code=503, model_name="gemini-test", body={"error": "overloaded"}),
        httpx.ConnectError("connection refused"),
        RuntimeError("provider exploded"),
    ],
)
async def test_transport_errors_are_not_retried(compiled_prompt, configured, error):
    backend = RecordingBackend(error=error)
    client = GenerationClient(configured, backend=backend)

    outcome = await client.generate(compiled_prompt)

    assert outcome.kind is FailureKind.TRANSPORT_ERROR
    assert len(backend.calls) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_http_status_is_kept_in_detail(compiled_prompt, configured):
    backend = RecordingBackend(error=ModelHTTPError(status_code=429, model_name="gemini-test"))
    client = GenerationClient(configured, backend=backend)

    outcome = await client.generate(compiled_prompt)

    assert outcome.detail.startswith("HTTP 429")


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("result", [None, "", "   \n", {"candidates": []}])
async def test_response_without_text_is_malformed(compiled_prompt, configured, result):
    client = GenerationClient(configured, backend=RecordingBackend(result=result))

    outcome = await client.generate(compiled_prompt)

    assert outcome.kind is FailureKind.MALFORMED_RESPONSE


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unexpected_model_behavior_is_malformed(compiled_prompt, configured):
    backend = RecordingBackend(error=UnexpectedModelBehavior("Received empty model response"))
    client = GenerationClient(configured, backend=backend)

    outcome = await client.generate(compiled_prompt)

    assert outcome.kind is FailureKind.MALFORMED_RESPONSE


@pytest.fixture
def logged_errors(monkeypatch):
    """Capture logfire.error calls made by the generation client."""
    calls = []

    def fake_error(msg_template, **kwargs):
        calls.append((msg_template, kwargs))

    monkeypatch.setattr(logfire, "error", fake_error)
    return calls


@pytest.mark.unit
@pytest.mark.asyncio
async def test_failure_log_records_the_exception(compiled_prompt, configured, logged_errors):
    error = ConnectionError("upstream unreachable")
    client = GenerationClient(configured, backend=RecordingBackend(error=error))

    await client.generate(compiled_prompt)

    [(message, kwargs)] = logged_errors
    assert message == "Email generation failed"
    assert kwargs["_exc_info"] is error
    assert "exc_info" not in kwargs
    assert kwargs["failure_kind"] == "transport_error"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_malformed_output_log_has_no_exception(compiled_prompt, configured, logged_errors):
    client = GenerationClient(configured, backend=RecordingBackend(result=""))

    await client.generate(compiled_prompt)

    [(_, kwargs)] = logged_errors
    assert kwargs["_exc_info"] is False


# ===================================================================
# TESTS - Default pydantic-ai backend
# ===================================================================

@pytest.mark.unit
@pytest.mark.asyncio
async def test_gemini_backend_sends_prompt_and_settings(compiled_prompt, configured):
    seen = {}

    def fake_gemini(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        seen["prompt"] = messages[-1].parts[-1].content
        seen["settings"] = info.model_settings
        return ModelResponse(parts=[TextPart("Subject: Project Update\n\nHi,\n\nDone.\n\nBest,\nSam")])

    backend = GeminiBackend(configured, model=FunctionModel(fake_gemini))
    client = GenerationClient(configured, backend=backend)

    outcome = await client.generate(compiled_prompt)

    assert outcome == GenerationSuccess("Subject: Project Update\n\nHi,\n\nDone.\n\nBest,\nSam")
    assert seen["prompt"] == compiled_prompt.instruction_text
    assert seen["settings"]["temperature"] == 0.9
    assert seen["settings"]["top_p"] == 0.95
    assert seen["settings"]["max_tokens"] == 400

"""Utilities for creating pydantic-ai agents backed by Google Gemini."""

import logging
from typing import Optional, Union

from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

logger = logging.getLogger(__name__)


def create_gemini_model(model_name: str, api_key: str) -> GoogleModel:
    """Build a Gemini model with an explicit API key (no environment lookup)."""
    return GoogleModel(model_name, provider=GoogleProvider(api_key=api_key))


def create_agent(
    model: Union[str, Model],
    system_prompt: Optional[str] = None,
    temperature: float = 0.9,
    top_p: Optional[float] = None,
    max_tokens: int = 700,
    retries: int = 0,
    timeout: Optional[float] = None,
) -> Agent[None, str]:
    """Create a text-output pydantic-ai Agent."""
    model_settings = {
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    if top_p is not None:
        model_settings["top_p"] = top_p
    if timeout is not None:
        model_settings["timeout"] = timeout

    agent = Agent(
        model=model,
        output_type=str,
        system_prompt=system_prompt or (),
        retries=retries,
        model_settings=model_settings,
    )

    logger.debug(
        "Created agent: model=%s, temperature=%s, top_p=%s, max_tokens=%s, retries=%s, timeout=%s",
        getattr(model, "model_name", model),
        temperature,
        top_p,
        max_tokens,
        retries,
        timeout,
    )

    return agent


async def run_agent(
    prompt: str,
    model: Union[str, Model],
    system_prompt: Optional[str] = None,
    temperature: float = 0.9,
    top_p: Optional[float] = None,
    max_tokens: int = 700,
    retries: int = 0,
    timeout: Optional[float] = None,
) -> str:
    """Create an agent, invoke it with prompt, and return the text output."""
    agent = create_agent(
        model=model,
        system_prompt=system_prompt,
        temperature=temperature,
        top_p=top_p,
        max_tokens=max_tokens,
        retries=retries,
        timeout=timeout,
    )

    result = await agent.run(prompt)
    return result.output

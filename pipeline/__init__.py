"""
Pipeline factory function.

This module provides create_email_pipeline() which wires the pipeline
steps together from explicit configuration.
"""

from typing import Optional

from pipeline.models.core import GenerationServiceConfig


def create_email_pipeline(
    config: GenerationServiceConfig,
    backend=None,
    include_diagnostics: bool = False,
    humanize_seed: Optional[int] = None,
):
    """
    Factory function to create a fully configured email generation pipeline.

    Steps run in this order:
    1. RequestValidator: Check subject/purpose, fill defaults
    2. PromptCompiler: Build instruction text and generation parameters
    3. GenerationClient: One time-bounded call to the generation service
    4. ResultAssembler: Generated text, or a FallbackSynthesizer email

    Args:
        config: Generation service configuration (credential, model, timeout)
        backend: Optional generation backend; defaults to Gemini via pydantic-ai
        include_diagnostics: Expose failure details in result metadata
        humanize_seed: When set, English fallback skeletons pass through a Humanizer
            seeded with this value

    Returns:
        EmailPipelineRunner ready to execute

    Example:
        ```python
        from pipeline import create_email_pipeline
        from config import settings

        runner = create_email_pipeline(settings.generation_service_config())
        result = await runner.run({"subject": "Project Update", "tone": "casual"})
        print(result.source, result.text)
        ```
    """
    # Import step classes lazily to avoid circular imports at package import time
    from pipeline.core.runner import EmailPipelineRunner
    from pipeline.steps.fallback_synthesizer import Humanizer
    from pipeline.steps.generation_client import GenerationClient
    from pipeline.steps.result_assembler import ResultAssembler

    humanizer = Humanizer(seed=humanize_seed) if humanize_seed is not None else None

    return EmailPipelineRunner(
        client=GenerationClient(config, backend=backend),
        assembler=ResultAssembler(
            include_diagnostics=include_diagnostics,
            humanizer=humanizer,
        ),
    )

"""
Core pipeline infrastructure.

This package contains the core components of the pipeline:
- EmailPipelineRunner: Orchestrator for validate/compile/generate/assemble

Data models are in pipeline.models.core
Custom exceptions are in pipeline.core.exceptions
"""

from pipeline.core.runner import EmailPipelineRunner

__all__ = [
    "EmailPipelineRunner",
]

"""
Generation Client Step

Single, time-bounded call to the generation service with failure
classification.
"""

from .main import GeminiBackend, GenerationBackend, GenerationClient

__all__ = ["GeminiBackend", "GenerationBackend", "GenerationClient"]

"""
Fallback Synthesizer Step

Offline, deterministic email templates used whenever generation is not
possible.
"""

from .humanizer import Humanizer
from .main import render_skeleton, select_skeleton, synthesize_fallback
from .templates import FALLBACK_TEMPLATES, FallbackSkeleton

__all__ = [
    "FALLBACK_TEMPLATES",
    "FallbackSkeleton",
    "Humanizer",
    "render_skeleton",
    "select_skeleton",
    "synthesize_fallback",
]

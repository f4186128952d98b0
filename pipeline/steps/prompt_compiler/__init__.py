"""
Prompt Compiler Step

Builds the instruction text and generation parameters for a request.
"""

from .main import compile_prompt, create_instruction_text

__all__ = ["compile_prompt", "create_instruction_text"]

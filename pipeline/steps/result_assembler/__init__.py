"""
Result Assembler Step

Combines generated or fallback text with a source tag and metadata.
"""

from .main import FAILURE_NOTE, UNCONFIGURED_NOTE, ResultAssembler

__all__ = ["FAILURE_NOTE", "UNCONFIGURED_NOTE", "ResultAssembler"]

"""
Request Validator Step

Checks required fields and fills defaults for optional ones.
"""

from .main import validate_request

__all__ = ["validate_request"]

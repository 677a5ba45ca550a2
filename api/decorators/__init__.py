"""
Route decorators
"""
from .error_handler import EXCEPTION_MAP, handle_api_errors

__all__ = ["EXCEPTION_MAP", "handle_api_errors"]

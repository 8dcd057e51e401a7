"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `zai_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import (
    classify_exception,
    code_for_status,
    code_for_vendor_error,
    error_from_exception,
    error_from_status,
    is_transient_status,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "code_for_status",
    "code_for_vendor_error",
    "error_from_exception",
    "error_from_status",
    "is_transient_status",
]

"""Z.ai provider package."""

from .client import ZAI_METADATA, ZaiProvider

__all__ = ["ZAI_METADATA", "ZaiProvider"]

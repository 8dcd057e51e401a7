"""zai_providers.config.defaults
=============================

Central place for small, stable default values used across the package.
Values here can be overridden through configuration keys (environment, the
optional config file or an injected source) but provide sensible fallbacks
for local development and tests.

Only plain constants live here; this module imports nothing from the rest
of the package.
"""

from __future__ import annotations

# ---- Vendor wire format ----
# Output token cap sent when the model config does not set one.
DEFAULT_MAX_TOKENS = 8192
# Anthropic messages API version header (also accepted by Z.ai's
# Anthropic-compatible endpoint).
ANTHROPIC_VERSION_HEADER = "anthropic-version"
ANTHROPIC_API_VERSION = "2023-06-01"
API_KEY_HEADER = "x-api-key"

# Request timeout (seconds) when no override is configured.
DEFAULT_TIMEOUT_SECONDS = 600

# ---- Z.ai ----
ZAI_DEFAULT_MODEL = "glm-4.5"
ZAI_DEFAULT_FAST_MODEL = "glm-4.5-air"
ZAI_KNOWN_MODELS = (
    ("glm-4.6", 200_000),
    ("glm-4.5", 128_000),
    ("glm-4.5-air", 128_000),
)
ZAI_DEFAULT_HOST = "https://api.z.ai"
ZAI_MESSAGES_PATH = "api/anthropic/v1/messages"
ZAI_DOC_URL = "https://z.ai/docs"

# ---- Anthropic ----
ANTHROPIC_DEFAULT_MODEL = "claude-sonnet-4-5"
ANTHROPIC_DEFAULT_FAST_MODEL = "claude-haiku-4-5"
ANTHROPIC_KNOWN_MODELS = (
    ("claude-sonnet-4-5", 200_000),
    ("claude-haiku-4-5", 200_000),
    ("claude-opus-4-1", 200_000),
)
ANTHROPIC_DEFAULT_HOST = "https://api.anthropic.com"
ANTHROPIC_MESSAGES_PATH = "v1/messages"
ANTHROPIC_DOC_URL = "https://docs.anthropic.com/en/docs/about-claude/models"

# ---- Retry policy ----
DEFAULT_RETRY_MAX_ATTEMPTS = 3
DEFAULT_RETRY_INITIAL_DELAY = 1.0
DEFAULT_RETRY_BACKOFF_MULTIPLIER = 2.0
DEFAULT_RETRY_MAX_DELAY = 30.0


__all__ = [
    "DEFAULT_MAX_TOKENS",
    "ANTHROPIC_VERSION_HEADER",
    "ANTHROPIC_API_VERSION",
    "API_KEY_HEADER",
    "DEFAULT_TIMEOUT_SECONDS",
    "ZAI_DEFAULT_MODEL",
    "ZAI_DEFAULT_FAST_MODEL",
    "ZAI_KNOWN_MODELS",
    "ZAI_DEFAULT_HOST",
    "ZAI_MESSAGES_PATH",
    "ZAI_DOC_URL",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_FAST_MODEL",
    "ANTHROPIC_KNOWN_MODELS",
    "ANTHROPIC_DEFAULT_HOST",
    "ANTHROPIC_MESSAGES_PATH",
    "ANTHROPIC_DOC_URL",
    "DEFAULT_RETRY_MAX_ATTEMPTS",
    "DEFAULT_RETRY_INITIAL_DELAY",
    "DEFAULT_RETRY_BACKOFF_MULTIPLIER",
    "DEFAULT_RETRY_MAX_DELAY",
]

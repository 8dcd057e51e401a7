"""Messages provider adapter.

Purpose:
- One orchestrator for every vendor speaking a messages-style API. The
  format-specific work (request body, batch decoding, stream decoding) is
  delegated to the :class:`MessagesCodec` chosen at construction; retry,
  HTTP, logging and configuration live here once.

Call flow:
- Batch: ``translate`` → POST under :func:`call_with_retry` → non-2xx raises
  a status-classified ``ProviderError`` → ``decode_batch`` → request log.
- Streaming: ``translate(stream=True)`` → a single POST (never retried);
  a non-2xx status raises before any iterator is returned → ``decode_stream``
  wrapped in a :class:`MessageStream` that closes the response on exit.

Concrete providers subclass :class:`MessagesProvider` and set ``METADATA``,
``MESSAGES_PATH`` and optionally ``DEFAULT_FAST_MODEL``.
"""
from __future__ import annotations

import logging
from contextlib import suppress
from typing import ClassVar, Iterator, Optional, Sequence, Tuple, Union

import httpx

from ..config import ConfigSource
from ..config.defaults import ANTHROPIC_API_VERSION, ANTHROPIC_VERSION_HEADER, API_KEY_HEADER
from .errors import ErrorCode, ProviderError, error_from_exception, error_from_status
from .formats import AnthropicMessagesCodec, MessagesCodec
from .http import ApiClient, AuthMethod
from .interfaces import LLMProvider, SupportsStreaming
from .logging import LogContext, get_logger, normalized_log_event
from .models import Message, ModelConfig, ProviderMetadata, ProviderUsage, Tool
from .request_log import RequestLog
from .resilience import DEFAULT_RETRY_CONFIG, RetryConfig, call_with_retry
from .settings import ProviderSettings, resolve_settings
from .streaming import MessageStream, Snapshot


class MessagesProvider(LLMProvider, SupportsStreaming):
    """Generic messages-API adapter parameterized by a codec."""

    METADATA: ClassVar[ProviderMetadata]
    MESSAGES_PATH: ClassVar[str] = "v1/messages"
    DEFAULT_FAST_MODEL: ClassVar[Optional[str]] = None

    def __init__(
        self,
        model: Union[ModelConfig, str, None] = None,
        *,
        config: Optional[ConfigSource] = None,
        settings: Optional[ProviderSettings] = None,
        api_client: Optional[ApiClient] = None,
        codec: Optional[MessagesCodec] = None,
        retry_config: Optional[RetryConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Build the adapter; configuration is read here and never again.

        Parameters:
            model: Model config or model name; defaults to the advertised
                default model.
            config: Configuration source (defaults to the environment).
            settings: Pre-resolved settings; skips reading ``config``.
            api_client: Pre-built client; otherwise one is built from settings.
            codec: Format strategy; defaults to the full messages codec.
            retry_config: Batch retry policy.
            transport: ``httpx`` transport override (tests).
            logger: Logger override.

        Raises:
            ProviderError: ``CONFIGURATION`` when settings are missing or invalid.
        """
        meta = self.metadata()
        self._settings = settings or resolve_settings(meta, config)
        self._model = self._resolve_model(model)
        self._codec: MessagesCodec = codec or AnthropicMessagesCodec()
        self._api_client = api_client or self._build_api_client(transport)
        self._retry_config = retry_config or DEFAULT_RETRY_CONFIG
        self._logger = logger or get_logger(meta.name)

    @classmethod
    def metadata(cls) -> ProviderMetadata:
        """Capability advertisement for registries and setup UIs."""
        return cls.METADATA

    @classmethod
    def from_config(cls, config: ConfigSource, model: Union[ModelConfig, str, None] = None, **kwargs):
        return cls(model, config=config, **kwargs)

    def _resolve_model(self, model: Union[ModelConfig, str, None]) -> ModelConfig:
        meta = self.metadata()
        if not isinstance(model, ModelConfig):
            name = model or meta.default_model
            model = ModelConfig(model_name=name, context_limit=meta.context_limit_for(name))
        if self.DEFAULT_FAST_MODEL:
            model = model.with_fast(self.DEFAULT_FAST_MODEL)
        return model

    def _build_api_client(self, transport: Optional[httpx.BaseTransport]) -> ApiClient:
        return ApiClient(
            self._settings.host,
            AuthMethod(API_KEY_HEADER, self._settings.api_key),
            timeout=self._settings.timeout_seconds,
            headers={ANTHROPIC_VERSION_HEADER: ANTHROPIC_API_VERSION},
            provider=self.provider_name,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Introspection

    @property
    def provider_name(self) -> str:
        return self.metadata().name

    @property
    def codec(self) -> MessagesCodec:
        return self._codec

    def get_model_config(self) -> ModelConfig:
        return self._model

    def supports_streaming(self) -> bool:
        return bool(self._codec.supports_streaming)

    # ------------------------------------------------------------------
    # Batch

    def complete_once(
        self,
        model_config: ModelConfig,
        system: Optional[str],
        messages: Sequence[Message],
        tools: Sequence[Tool] = (),
    ) -> Tuple[Message, ProviderUsage]:
        """Run one batch completion with retries.

        Returns:
            Tuple[Message, ProviderUsage]: Assistant message and usage tagged
            with ``model_config.model_name``.

        Raises:
            ProviderError: transport/status failure after the retry policy
                gave up, or ``DECODE`` for an unreadable body.
            ValueError: a message role the vendor does not accept.
        """
        model = model_config.model_name
        payload = self._codec.translate(model_config, system, messages, tools, stream=False)
        log = RequestLog.start(provider=self.provider_name, model=model, payload=payload, logger=self._logger)
        retry_config = self._retry_config.with_attempt_logger(self._attempt_logger(log))
        try:
            body = call_with_retry(retry_config, lambda: self._post(payload, model))
            message, usage = self._codec.decode_batch(body, provider=self.provider_name, model=model)
        except ProviderError as e:
            log.error(e)
            raise
        log.write(message, usage)
        return message, ProviderUsage(model=model, usage=usage)

    def complete(
        self, system: Optional[str], messages: Sequence[Message], tools: Sequence[Tool] = ()
    ) -> Tuple[Message, ProviderUsage]:
        """Batch completion with the adapter's own model config."""
        return self.complete_once(self._model, system, messages, tools)

    def complete_fast(
        self, system: Optional[str], messages: Sequence[Message], tools: Sequence[Tool] = ()
    ) -> Tuple[Message, ProviderUsage]:
        """Batch completion on the fast model, retrying once on the regular model.

        When no distinct fast model is configured this is :meth:`complete`.
        """
        fast = self._model.fast()
        if fast is self._model:
            return self.complete(system, messages, tools)
        try:
            return self.complete_once(fast, system, messages, tools)
        except ProviderError as e:
            with suppress(Exception):
                normalized_log_event(
                    self._logger,
                    "fast_model.fallback",
                    LogContext(provider=self.provider_name, model=fast.model_name),
                    phase="fallback",
                    error_code=e.code.value,
                    level=logging.WARNING,
                    fallback_model=self._model.model_name,
                )
            return self.complete_once(self._model, system, messages, tools)

    def _post(self, payload, model: str) -> str:
        response = self._api_client.post(self.MESSAGES_PATH, payload, model=model)
        if not response.is_success:
            raise error_from_status(response.status_code, response.text, provider=self.provider_name, model=model)
        return response.text

    def _attempt_logger(self, log: RequestLog):
        user_logger = self._retry_config.attempt_logger
        if user_logger is None:
            return log.attempt

        def _both(**kwargs) -> None:
            log.attempt(**kwargs)
            user_logger(**kwargs)

        return _both

    # ------------------------------------------------------------------
    # Streaming

    def complete_streaming(
        self, system: Optional[str], messages: Sequence[Message], tools: Sequence[Tool] = ()
    ) -> MessageStream:
        """Open a streaming completion with the adapter's model config.

        The request is sent before this method returns; a non-2xx status
        raises here. The returned :class:`MessageStream` yields
        ``(Message, Usage | None)`` snapshots.

        Raises:
            ProviderError: codec without streaming (``VALIDATION``), transport
                failure, or non-2xx status.
        """
        model = self._model.model_name
        if not self.supports_streaming():
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message=f"{self._codec.name} codec does not support streaming",
                provider=self.provider_name,
                model=model,
            )
        payload = self._codec.translate(self._model, system, messages, tools, stream=True)
        log = RequestLog.start(
            provider=self.provider_name, model=model, payload=payload, mode="stream", logger=self._logger
        )
        try:
            response = self._open(payload, model)
        except ProviderError as e:
            log.attempt(attempt=0, max_attempts=1, delay=None, error=e)
            log.error(e)
            raise
        log.attempt(attempt=0, max_attempts=1, delay=None, error=None)

        def _finished(last: Optional[Snapshot], emitted: int) -> None:
            message, usage = last if last is not None else (None, None)
            log.write(message, usage, emitted=emitted)

        return MessageStream(
            self._snapshots(response, model),
            on_finish=_finished,
            on_error=log.error,
            on_close=response.close,
        )

    def _open(self, payload, model: str) -> httpx.Response:
        response = self._api_client.open_stream(self.MESSAGES_PATH, payload, model=model)
        if response.is_success:
            return response
        try:
            body: Optional[str] = response.read().decode("utf-8", errors="replace")
        except httpx.HTTPError:
            body = None
        finally:
            response.close()
        raise error_from_status(response.status_code, body, provider=self.provider_name, model=model)

    def _snapshots(self, response: httpx.Response, model: str) -> Iterator[Snapshot]:
        try:
            yield from self._codec.decode_stream(
                self._body_chunks(response, model), provider=self.provider_name, model=model
            )
        finally:
            response.close()

    def _body_chunks(self, response: httpx.Response, model: str) -> Iterator[bytes]:
        try:
            yield from response.iter_bytes()
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise error_from_exception(e, provider=self.provider_name, model=model) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self._model.model_name!r}, codec={self._codec!r})"


__all__ = ["MessagesProvider"]

"""Entry point that routes requests to the provider serving each model."""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Union

from .base import BaseProvider, StreamCallback
from .deepseek_provider import Deepseek
from .model_manager import ModelManager, default_manager
from .openai_provider import OpenAI
from .schema import (
    CompletionRequest,
    CompletionResponse,
    EmbeddingRequest,
    EmbeddingResponse,
    ErrorCode,
    HermesError,
)

PathLike = Union[str, "os.PathLike[str]"]

_PROVIDER_FACTORIES = {
    "openai": OpenAI,
    "deepseek": Deepseek,
}

_DOWNLOADABLE_PROVIDERS = frozenset({"llama"})


def supports_model_download(provider: str) -> bool:
    """True if models of ``provider`` can be downloaded to local files."""
    return provider in _DOWNLOADABLE_PROVIDERS


def create_provider(provider: str) -> Optional[BaseProvider]:
    """A new provider object for the given name, or None if the name is not supported."""
    factory = _PROVIDER_FACTORIES.get(provider)
    return factory() if factory is not None else None


class Hermes:
    """Looks up each request's model and hands the request to its provider."""

    def __init__(self, manager: Optional[ModelManager] = None) -> None:
        self.manager = manager if manager is not None else default_manager()
        self.initialized = False
        self._providers: Dict[str, BaseProvider] = {}

    def initialize(self, config_paths: Iterable[PathLike]) -> None:
        """Load model configuration; raises HermesError if no model file could be loaded."""
        if not self.manager.initialize(config_paths):
            raise HermesError(ErrorCode.INVALID_REQUEST, "no model configuration could be loaded")
        self.initialized = True

    def does_model_need_api_key(self, model: str) -> bool:
        """True if ``model`` is served by a provider that requires an API key."""
        return self.manager.get_provider(model) == "openai"

    def get_provider(self, provider_name: str) -> Optional[BaseProvider]:
        """The shared provider object for ``provider_name``, created on first use."""
        provider = self._providers.get(provider_name)
        if provider is None:
            provider = create_provider(provider_name)
            if provider is None:
                return None
            provider.manager = self.manager
            self._providers[provider_name] = provider
        return provider

    def _provider_for(self, model: str) -> BaseProvider:
        if not self.initialized:
            raise HermesError(ErrorCode.INVALID_REQUEST, "library is not initialized")
        info = self.manager.get_model_info(model)
        if info is None:
            raise HermesError(ErrorCode.UNKNOWN_MODEL, f"unknown model {model!r}")
        provider = self.get_provider(info.provider)
        if provider is None:
            raise HermesError(
                ErrorCode.UNSUPPORTED_PROVIDER, f"unsupported provider {info.provider!r}"
            )
        return provider

    def completion(self, request: CompletionRequest) -> CompletionResponse:
        """Run a chat completion with the provider of the request's model."""
        return self._provider_for(request.model).completion(request)

    def streaming_completion(self, request: CompletionRequest, callback: StreamCallback) -> None:
        """Run a streaming chat completion, passing each text piece to ``callback``."""
        self._provider_for(request.model).streaming_completion(request, callback)

    def get_embeddings(self, request: EmbeddingRequest) -> EmbeddingResponse:
        """Return the embedding of the request's input from the model's provider."""
        return self._provider_for(request.model).get_embeddings(request)
"""Common behaviour of every model provider."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Union

import requests

from .model_manager import ModelManager, default_manager
from .schema import (
    CompletionRequest,
    CompletionResponse,
    EmbeddingRequest,
    EmbeddingResponse,
    ErrorCode,
    HermesError,
)

StreamCallback = Callable[[str], None]
ChunkParser = Callable[[Union[str, bytes]], Optional[str]]


class BaseProvider(ABC):
    """A backend that serves completions and embeddings for some models."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.manager: ModelManager = default_manager()

    @abstractmethod
    def completion(self, request: CompletionRequest) -> CompletionResponse:
        """Run a chat completion and return its result."""

    @abstractmethod
    def streaming_completion(self, request: CompletionRequest, callback: StreamCallback) -> None:
        """Run a chat completion, handing each piece of text to ``callback`` as it arrives."""

    @abstractmethod
    def get_embeddings(self, request: EmbeddingRequest) -> EmbeddingResponse:
        """Return the embedding of the request's input."""

    def api_key_for(self, request: Union[CompletionRequest, EmbeddingRequest]) -> str:
        """The API key to use: the request's own, else the one configured for its model."""
        if request.api_key:
            return request.api_key
        info = self.manager.get_model_info(request.model)
        if info is not None and info.api_key:
            return info.api_key
        raise HermesError(ErrorCode.API_KEY_NOT_FOUND, f"no API key for model {request.model!r}")


def _send(
    method: str,
    url: str,
    headers: Dict[str, str],
    body: Dict[str, Any],
    *,
    stream: bool = False,
) -> requests.Response:
    try:
        response = requests.request(
            method, url, headers=headers, data=json.dumps(body), stream=stream
        )
    except requests.RequestException as exc:
        raise HermesError(ErrorCode.NETWORK_ERROR, str(exc)) from exc
    if response.status_code != 200:
        response.close()
        raise HermesError(ErrorCode.NETWORK_ERROR, f"HTTP status {response.status_code}")
    return response


def _stream(
    method: str,
    url: str,
    headers: Dict[str, str],
    body: Dict[str, Any],
    callback: StreamCallback,
    parse_chunk: ChunkParser,
) -> None:
    response = _send(method, url, headers, body, stream=True)
    with response:
        try:
            for line in response.iter_lines():
                try:
                    content = parse_chunk(line)
                except ValueError as exc:
                    raise HermesError(ErrorCode.NETWORK_ERROR, "malformed stream chunk") from exc
                if content is not None:
                    callback(content)
        except requests.RequestException as exc:
            raise HermesError(ErrorCode.NETWORK_ERROR, str(exc)) from exc


def _load_object(text: str) -> Dict[str, Any]:
    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise HermesError(ErrorCode.INVALID_RESPONSE, "response is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise HermesError(ErrorCode.INVALID_RESPONSE, "response is not a JSON object")
    return payload


def _fill_common(payload: Dict[str, Any], response: Union[CompletionResponse, EmbeddingResponse]) -> None:
    model = payload.get("model")
    if isinstance(model, str):
        response.model = model
    usage = payload.get("usage")
    if isinstance(usage, dict) and isinstance(usage.get("total_tokens"), int):
        response.tokens_used = usage["total_tokens"]


def _parse_completion(text: str, provider: str) -> CompletionResponse:
    payload = _load_object(text)
    choices = payload.get("choices")
    message = None
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        message = choices[0].get("message")
    if not isinstance(message, dict) or not isinstance(message.get("content"), str):
        raise HermesError(ErrorCode.INVALID_RESPONSE, "response holds no message content")
    response = CompletionResponse(text=message["content"], provider=provider)
    _fill_common(payload, response)
    return response


def _parse_embedding(text: str, provider: str) -> EmbeddingResponse:
    payload = _load_object(text)
    data = payload.get("data")
    vector = None
    if isinstance(data, list) and data and isinstance(data[0], dict):
        vector = data[0].get("embedding")
    if not isinstance(vector, list) or not all(
        isinstance(value, (int, float)) and not isinstance(value, bool) for value in vector
    ):
        raise HermesError(ErrorCode.INVALID_RESPONSE, "response holds no embedding")
    response = EmbeddingResponse(embedding=[float(value) for value in vector], provider=provider)
    _fill_common(payload, response)
    return response
"""Provider for the OpenAI chat and embedding API."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Union

from .base import BaseProvider, StreamCallback, _parse_completion, _parse_embedding, _send, _stream
from .schema import CompletionRequest, CompletionResponse, EmbeddingRequest, EmbeddingResponse

DEFAULT_API_URL = "https://api.openai.com/v1"
_DATA_PREFIX = "data: "


def build_request_body(request: CompletionRequest, streaming: bool = False) -> Dict[str, Any]:
    """The JSON body of a chat completion call."""
    body: Dict[str, Any] = {
        "model": request.model,
        "stream": streaming,
        "messages": [{"role": msg.role, "content": msg.content} for msg in request.messages],
    }
    if request.temperature is not None:
        body["temperature"] = request.temperature
    if request.max_tokens is not None:
        body["max_tokens"] = request.max_tokens
    return body


def build_headers(api_key: str) -> Dict[str, str]:
    """HTTP headers; the Authorization header is left out when there is no key."""
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def parse_completion(text: str) -> CompletionResponse:
    """Read a chat completion response body."""
    return _parse_completion(text, "openai")


def parse_embedding(text: str) -> EmbeddingResponse:
    """Read an embeddings response body."""
    return _parse_embedding(text, "openai")


def parse_stream_chunk(data: Union[str, bytes]) -> Optional[str]:
    """The text carried by one server-sent event line, or None if it carries none.

    Raises ValueError when the event's payload is malformed.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    data = data.rstrip("\r\n")
    if not data.startswith(_DATA_PREFIX):
        return None
    payload = data[len(_DATA_PREFIX):]
    if payload == "[DONE]":
        return None
    event = json.loads(payload)
    if not isinstance(event, dict):
        return None
    choices = event.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    delta = choices[0].get("delta")
    if not isinstance(delta, dict) or "content" not in delta:
        return None
    content = delta["content"]
    if not isinstance(content, str):
        raise ValueError("delta content is not a string")
    return content


class OpenAI(BaseProvider):
    """Chat completions and embeddings over the OpenAI HTTP API."""

    def __init__(self, api_url: str = DEFAULT_API_URL) -> None:
        super().__init__("openai")
        self.api_url = api_url

    def completion(self, request: CompletionRequest) -> CompletionResponse:
        api_key = self.api_key_for(request)
        response = _send(
            "POST",
            f"{self.api_url}/chat/completions",
            build_headers(api_key),
            build_request_body(request, False),
        )
        return parse_completion(response.text)

    def streaming_completion(self, request: CompletionRequest, callback: StreamCallback) -> None:
        api_key = self.api_key_for(request)
        _stream(
            "POST",
            f"{self.api_url}/chat/completions",
            build_headers(api_key),
            build_request_body(request, True),
            callback,
            parse_stream_chunk,
        )

    def get_embeddings(self, request: EmbeddingRequest) -> EmbeddingResponse:
        api_key = self.api_key_for(request)
        response = _send(
            "POST",
            f"{self.api_url}/embeddings",
            build_headers(api_key),
            {"model": request.model, "input": request.input},
        )
        return parse_embedding(response.text)
"""Provider for the DeepSeek chat and embedding API."""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseProvider, StreamCallback, _parse_completion, _parse_embedding, _send, _stream
from .openai_provider import parse_stream_chunk
from .schema import CompletionRequest, CompletionResponse, EmbeddingRequest, EmbeddingResponse

DEFAULT_API_URL = "https://api.deepseek.com/chat/completions"
DEFAULT_EMBEDDING_URL = "https://api.deepseek.com/embeddings"
_CHAT_MODEL = "deepseek-chat"


def build_request_body(request: CompletionRequest, streaming: bool = False) -> Dict[str, Any]:
    """The JSON body of a chat completion call; always targets the main chat model."""
    body: Dict[str, Any] = {
        "model": _CHAT_MODEL,
        "stream": streaming,
        "messages": [{"role": msg.role, "content": msg.content} for msg in request.messages],
    }
    if request.temperature is not None:
        body["temperature"] = request.temperature
    if request.max_tokens is not None:
        body["max_tokens"] = request.max_tokens
    body.update(
        {
            "frequency_penalty": 0,
            "presence_penalty": 0,
            "response_format": {"type": "text"},
            "stream": False,
            "top_p": 1,
        }
    )
    return body


def build_headers(api_key: str) -> Dict[str, str]:
    """HTTP headers for a DeepSeek call."""
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def parse_completion(text: str) -> CompletionResponse:
    """Read a chat completion response body."""
    return _parse_completion(text, "deepseek")


def parse_embedding(text: str) -> EmbeddingResponse:
    """Read an embeddings response body."""
    return _parse_embedding(text, "deepseek")


class Deepseek(BaseProvider):
    """Chat completions and embeddings over the DeepSeek HTTP API."""

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        embedding_url: str = DEFAULT_EMBEDDING_URL,
    ) -> None:
        super().__init__("deepseek")
        self.api_url = api_url
        self.embedding_url = embedding_url

    def completion(self, request: CompletionRequest) -> CompletionResponse:
        api_key = self.api_key_for(request)
        response = _send(
            "POST", self.api_url, build_headers(api_key), build_request_body(request, False)
        )
        return parse_completion(response.text)

    def streaming_completion(self, request: CompletionRequest, callback: StreamCallback) -> None:
        api_key = self.api_key_for(request)
        _stream(
            "GET",
            self.api_url,
            build_headers(api_key),
            build_request_body(request, True),
            callback,
            parse_stream_chunk,
        )

    def get_embeddings(self, request: EmbeddingRequest) -> EmbeddingResponse:
        api_key = self.api_key_for(request)
        response = _send(
            "POST",
            self.embedding_url,
            build_headers(api_key),
            {"model": request.model, "input": request.input},
        )
        return parse_embedding(response.text)
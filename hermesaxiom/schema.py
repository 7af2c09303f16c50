"""Request, response and status types shared by the whole library."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ErrorCode(Enum):
    """Outcome of a library call."""

    SUCCESS = 0
    API_KEY_NOT_FOUND = 1
    UNKNOWN_MODEL = 2
    UNSUPPORTED_PROVIDER = 3
    NETWORK_ERROR = 4
    INVALID_RESPONSE = 5
    INVALID_REQUEST = 6
    NOT_IMPLEMENTED = 7
    MODEL_NOT_LOADED = 8
    GENERATION_ERROR = 9
    MODEL_DOWNLOADING = 10
    DOWNLOAD_FAILED = 11


class DownloadStatus(Enum):
    """State of a model file download."""

    NOT_STARTED = 0
    IN_PROGRESS = 1
    COMPLETED = 2
    FAILED = 3


@dataclass
class Message:
    """One chat message."""

    role: str
    content: str


@dataclass
class CompletionRequest:
    """A chat completion request."""

    model: str
    messages: List[Message] = field(default_factory=list)
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    api_key: Optional[str] = None
    provider: Optional[str] = None


@dataclass
class CompletionResponse:
    """The result of a chat completion."""

    text: str = ""
    model: str = ""
    tokens_used: int = 0
    provider: str = ""


@dataclass
class EmbeddingRequest:
    """A request for the embedding of one input text."""

    model: str
    input: str
    api_key: Optional[str] = None
    provider: Optional[str] = None


@dataclass
class EmbeddingResponse:
    """The embedding vector returned for an input text."""

    embedding: List[float] = field(default_factory=list)
    model: str = ""
    tokens_used: int = 0
    provider: str = ""


class HermesError(Exception):
    """Raised when a library call fails; carries the matching ErrorCode."""

    def __init__(self, code: ErrorCode, message: Optional[str] = None) -> None:
        self.code = code
        self.message = message if message is not None else code.name.lower().replace("_", " ")
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"HermesError({self.code!r}, {self.message!r})"
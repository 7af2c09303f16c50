import pytest

from hermesaxiom.base import BaseProvider
from hermesaxiom.model_manager import ModelInfo, ModelManager, default_manager
from hermesaxiom.schema import (
    CompletionRequest,
    CompletionResponse,
    EmbeddingRequest,
    EmbeddingResponse,
    ErrorCode,
    HermesError,
)


class _EchoProvider(BaseProvider):
    def completion(self, request):
        return CompletionResponse(text=request.messages[0].content, provider=self.name)

    def streaming_completion(self, request, callback):
        callback(request.model)

    def get_embeddings(self, request):
        return EmbeddingResponse(embedding=[1.0], provider=self.name)


@pytest.fixture
def provider():
    echo = _EchoProvider("echo")
    echo.manager = ModelManager()
    return echo


def test_base_provider_is_abstract():
    with pytest.raises(TypeError):
        BaseProvider("abstract")


def test_name_and_default_manager():
    echo = _EchoProvider("echo")
    assert echo.name == "echo"
    assert echo.manager is default_manager()


def test_request_key_wins(provider):
    provider.manager.add_model(ModelInfo(model="m", provider="echo", api_key="secret"))
    request = CompletionRequest(model="m", api_key="placeholder")
    assert provider.api_key_for(request) == "placeholder"


def test_falls_back_to_configured_key(provider):
    provider.manager.add_model(ModelInfo(model="m", provider="echo", api_key="secret"))
    request = EmbeddingRequest(model="m", input="hello")
    assert provider.api_key_for(request) == "secret"


def test_missing_key_raises(provider):
    provider.manager.add_model(ModelInfo(model="m", provider="echo"))
    with pytest.raises(HermesError) as info:
        provider.api_key_for(CompletionRequest(model="m"))
    assert info.value.code is ErrorCode.API_KEY_NOT_FOUND


def test_unknown_model_without_key_raises(provider):
    with pytest.raises(HermesError) as info:
        provider.api_key_for(EmbeddingRequest(model="unknown", input="x"))
    assert info.value.code is ErrorCode.API_KEY_NOT_FOUND


def test_empty_request_key_falls_back(provider):
    provider.manager.add_model(ModelInfo(model="m", provider="echo", api_key="token"))
    assert provider.api_key_for(CompletionRequest(model="m", api_key="")) == "token"
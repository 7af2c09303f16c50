# hermesaxiom

One small interface for chat completions and embeddings across several HTTP
providers. Models are described in JSON files, and each request is routed to
the provider that the model's configuration names.

The providers served are `openai` and `deepseek`.

## Installation

```
pip install hermesaxiom
```

## Model configuration

Give `Hermes.initialize` a list of configuration directories. Each directory
may hold a `models/` subdirectory of `*.json` files like this one:

```json
{
  "models": [
    {"model": "gpt-4o-mini", "provider": "openai", "api_key": "placeholder"},
    {"model": "deepseek-chat", "provider": "deepseek", "context_window": 65536}
  ]
}
```

Each entry needs `model` and `provider`; entries without them are skipped.
These fields are optional, with their defaults in `ModelInfo`: `mode`
(`"chat"`), `api_base`, `api_key`, `examples_as_sys_msg` (`false`),
`context_window` (4096), `max_tokens` (2048), `max_input_tokens` (3072),
`max_output_tokens` (1024), `input_cost_per_token` and
`output_cost_per_token` (0.0).

Directories are read in the order given, and the files within one directory
in sorted order. When a model appears again, the optional fields given the
later time replace the earlier ones. A file that cannot be read or parsed is
ignored; `initialize` raises `HermesError` with `INVALID_REQUEST` if no file
loaded at all. Paths are used as given (a leading `~` is not expanded).

The registry itself is `hermesaxiom.model_manager.ModelManager`, with
`get_model_info`, `get_provider`, `add_model` and the `model_provider_map`
property. `default_manager()` returns the process-wide instance that
`Hermes()` uses unless another manager is passed in.

## Usage

```python
from hermesaxiom.api import Hermes
from hermesaxiom.schema import CompletionRequest, EmbeddingRequest, Message, HermesError

hermes = Hermes()
hermes.initialize(["/etc/myapp", "/home/me/.config/myapp"])

request = CompletionRequest(
    model="gpt-4o-mini",
    messages=[Message(role="user", content="Say hello")],
    temperature=0.2,
    api_key="placeholder",
)

try:
    response = hermes.completion(request)
    print(response.text, response.tokens_used)
except HermesError as exc:
    print("failed:", exc.code)

# Streaming: the callback receives each piece of generated text.
hermes.streaming_completion(request, lambda piece: print(piece, end=""))

embedding = hermes.get_embeddings(
    EmbeddingRequest(model="text-embedding-3-small", input="hello", api_key="placeholder")
)
print(len(embedding.embedding))
```

The API key is the request's `api_key` if set, otherwise the `api_key` from
the model's configuration; with neither, the call raises
`API_KEY_NOT_FOUND`. `Hermes.does_model_need_api_key` is true for models
served by `openai`.

A failure raises `HermesError`. Its `code` attribute is an `ErrorCode`:
`INVALID_REQUEST` before `initialize` has succeeded, `UNKNOWN_MODEL`,
`UNSUPPORTED_PROVIDER`, `API_KEY_NOT_FOUND`, `NETWORK_ERROR` for connection
failures, non-200 replies and malformed stream events, and
`INVALID_RESPONSE` for bodies without the expected content.

The providers can also be used directly: `hermesaxiom.openai_provider.OpenAI`
(base URL `https://api.openai.com/v1` by default) and
`hermesaxiom.deepseek_provider.Deepseek`. The DeepSeek provider always asks
for the `deepseek-chat` model in completion calls. Each module also exposes
its `build_request_body`, `build_headers`, `parse_completion` and
`parse_embedding` helpers; `openai_provider.parse_stream_chunk` reads one
`data: ` server-sent event line.

## Downloading model files

`hermesaxiom.downloader.ModelDownloader.download_model(url, path, file_hash)`
fetches a file on a background thread and returns a `concurrent.futures.Future`
that resolves to `True` when the file is in place and, if a SHA-256 hex digest
was given, matches it. An existing file that already matches is not fetched
again. `verify_file(path, expected_hash)` runs the same check on a file on
disk.

## What it does not do

There is no local model inference. `supports_model_download("llama")` is true,
but no provider is created for `llama`, nor for `anthropic`: requests for
models configured with those providers raise `UNSUPPORTED_PROVIDER`. There is
no command-line tool; the package is a library only.
"""Registry of known models, loaded from JSON configuration directories."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class ModelInfo:
    """Settings of one model."""

    model: str
    provider: str
    mode: str = "chat"
    api_base: Optional[str] = None
    api_key: Optional[str] = None
    examples_as_sys_msg: bool = False
    context_window: int = 4096
    max_tokens: int = 2048
    max_input_tokens: int = 3072
    max_output_tokens: int = 1024
    input_cost_per_token: float = 0.0
    output_cost_per_token: float = 0.0


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {type(value).__name__}")
    return value


def _as_int(value: Any) -> int:
    if not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return int(value)


def _as_float(value: Any) -> float:
    if not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


_OPTIONAL_FIELDS: Dict[str, Callable[[Any], Any]] = {
    "mode": _as_str,
    "api_base": _as_str,
    "api_key": _as_str,
    "examples_as_sys_msg": _as_bool,
    "context_window": _as_int,
    "max_tokens": _as_int,
    "max_input_tokens": _as_int,
    "max_output_tokens": _as_int,
    "input_cost_per_token": _as_float,
    "output_cost_per_token": _as_float,
}


class ModelManager:
    """Holds model settings; later configuration directories override earlier ones."""

    def __init__(self) -> None:
        self._models: List[ModelInfo] = []
        self._provider_map: Dict[str, str] = {}
        self.initialized = False

    def initialize(self, config_paths: Iterable[PathLike]) -> bool:
        """Load every ``models/*.json`` under each path; True if any file loaded."""
        self._models.clear()
        self._provider_map.clear()

        any_loaded = False
        for config_path in config_paths:
            models_path = Path(config_path) / "models"
            if not models_path.is_dir():
                continue
            for entry in sorted(models_path.iterdir()):
                if entry.suffix != ".json":
                    continue
                if self._load_model_file(entry):
                    any_loaded = True

        self.initialized = any_loaded
        return any_loaded

    def _load_model_file(self, file_path: Path) -> bool:
        try:
            with open(file_path, encoding="utf-8") as handle:
                config = json.load(handle)

            if not isinstance(config, dict) or not isinstance(config.get("models"), list):
                return False

            for model_json in config["models"]:
                if not isinstance(model_json, dict):
                    continue
                if "model" not in model_json or "provider" not in model_json:
                    continue
                name = _as_str(model_json["model"])
                provider = _as_str(model_json["provider"])
                overrides = {
                    key: convert(model_json[key])
                    for key, convert in _OPTIONAL_FIELDS.items()
                    if key in model_json
                }

                existing = self._find(name)
                if existing is not None:
                    for key, value in overrides.items():
                        setattr(existing, key, value)
                else:
                    self._models.append(ModelInfo(model=name, provider=provider, **overrides))
                self._provider_map[name] = provider
            return True
        except (OSError, ValueError, TypeError):
            return False

    def _find(self, model: str) -> Optional[ModelInfo]:
        return next((info for info in self._models if info.model == model), None)

    def get_provider(self, model: str) -> Optional[str]:
        """Name of the provider serving ``model``, or None."""
        return self._provider_map.get(model)

    def get_model_info(self, model: str) -> Optional[ModelInfo]:
        """A copy of the settings of ``model``, or None."""
        info = self._find(model)
        return replace(info) if info is not None else None

    def add_model(self, model_info: ModelInfo) -> None:
        """Register a model unless one of that name is already known."""
        if self._find(model_info.model) is None:
            self._models.append(replace(model_info))
            self._provider_map[model_info.model] = model_info.provider

    @property
    def model_provider_map(self) -> Dict[str, str]:
        """Mapping of model name to provider name."""
        return dict(self._provider_map)


_default_manager = ModelManager()


def default_manager() -> ModelManager:
    """The process-wide shared manager."""
    return _default_manager
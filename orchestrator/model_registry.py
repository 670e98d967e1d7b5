from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from config.config import Provider


@dataclass(frozen=True)
class ProviderModels:
    provider: Provider
    default: str
    models: list[str]


@dataclass
class ModelRegistry:
    _providers: dict[Provider, ProviderModels]

    @classmethod
    def from_yaml(cls, path: str | None = None) -> "ModelRegistry":
        registry_path = Path(path) if path else Path(__file__).resolve().parent.parent / "config" / "model_registry.yaml"
        if not registry_path.exists():
            raise ValueError(f"Model registry not found at {registry_path}")

        data = yaml.safe_load(registry_path.read_text(encoding="utf-8"))
        if not data or "providers" not in data:
            raise ValueError("Invalid model registry: missing providers")

        providers: dict[Provider, ProviderModels] = {}
        for name, pdata in data["providers"].items():
            try:
                provider = Provider(name)
            except ValueError:
                raise ValueError(f"Unknown provider in model registry: {name}") from None

            pdata = pdata or {}
            models = pdata.get("models", [])
            if not isinstance(models, list) or not models:
                raise ValueError(f"Invalid models list for provider {name}")
            models = [str(m) for m in models]

            default = str(pdata.get("default") or models[0])
            if default not in models:
                raise ValueError(f"Default model {default} is not listed for provider {name}")

            providers[provider] = ProviderModels(provider=provider, default=default, models=models)

        return cls(_providers=providers)

    def providers(self) -> list[Provider]:
        return list(self._providers)

    def models_for(self, provider: Provider) -> list[str]:
        entry = self._providers.get(provider)
        return list(entry.models) if entry else []

    def default_for(self, provider: Provider) -> str | None:
        entry = self._providers.get(provider)
        return entry.default if entry else None

    def is_known_model(self, provider: Provider, model_name: str) -> bool:
        return (model_name or "").strip() in self.models_for(provider)

    def as_dict(self) -> dict[str, Any]:
        return {
            entry.provider.value: {"default": entry.default, "models": list(entry.models)}
            for entry in self._providers.values()
        }

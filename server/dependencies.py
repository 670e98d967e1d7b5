"""FastAPI dependencies for orchestrator and registry access."""

from orchestrator.core import OverlayOrchestrator
from orchestrator.model_registry import ModelRegistry


def get_model_registry() -> ModelRegistry:
    """Dependency returning the model registry (loaded once)."""
    if not hasattr(get_model_registry, "_instance"):
        get_model_registry._instance = ModelRegistry.from_yaml()
    return get_model_registry._instance


def get_orchestrator() -> OverlayOrchestrator:
    """Dependency returning the overlay orchestrator.

    The orchestrator itself is stateless; configuration is re-read per call.
    """
    if not hasattr(get_orchestrator, "_instance"):
        get_orchestrator._instance = OverlayOrchestrator(registry=get_model_registry())
    return get_orchestrator._instance

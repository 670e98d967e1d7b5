"""Overlay endpoints: answer the current selection and list providers."""

from fastapi import APIRouter, Depends, HTTPException, status

from models.errors import OverlayError
from orchestrator.core import OverlayOrchestrator
from orchestrator.model_registry import ModelRegistry
from orchestrator.provider_registry import DEFAULT_PROVIDER
from server.dependencies import get_model_registry, get_orchestrator
from server.schemas.requests import OverlayRequest
from server.schemas.responses import (
    ErrorDTO,
    OverlayResponseDTO,
    ProviderModelsDTO,
    ProvidersResponseDTO,
)
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/v1", tags=["Overlay"])


@router.post("/overlay", response_model=OverlayResponseDTO)
async def generate_overlay(
    request: OverlayRequest,
    orchestrator: OverlayOrchestrator = Depends(get_orchestrator),
):
    """Answer the currently selected text with the requested provider."""
    try:
        result = await orchestrator.generate_answer(request.provider, request.model)
    except OverlayError as e:
        logger.warning(
            "Overlay request returned an error",
            extra={"extra_fields": {"error_code": e.code, "provider": e.provider}},
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=ErrorDTO(code=e.code, message=e.message, provider=e.provider).model_dump(),
        ) from e

    return OverlayResponseDTO.from_answer_result(result)


@router.get("/providers", response_model=ProvidersResponseDTO)
async def list_providers(registry: ModelRegistry = Depends(get_model_registry)):
    """Known providers with their default and selectable models."""
    providers = {
        provider.value: ProviderModelsDTO(
            default=registry.default_for(provider), models=registry.models_for(provider)
        )
        for provider in registry.providers()
    }
    return ProvidersResponseDTO(default_provider=DEFAULT_PROVIDER.value, providers=providers)

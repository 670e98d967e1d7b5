"""Pydantic response models (DTOs) for FastAPI endpoints."""

from pydantic import BaseModel, Field


class OverlayResponseDTO(BaseModel):
    text: str
    provider: str
    model: str
    query: str = ""

    @classmethod
    def from_answer_result(cls, result):
        """Convert AnswerResult to DTO."""
        return cls(text=result.text, provider=result.provider, model=result.model, query=result.query)


class ErrorDTO(BaseModel):
    code: str
    message: str
    provider: str | None = None


class ProviderModelsDTO(BaseModel):
    default: str
    models: list[str] = Field(default_factory=list)


class ProvidersResponseDTO(BaseModel):
    default_provider: str
    providers: dict[str, ProviderModelsDTO]


class HealthResponseDTO(BaseModel):
    status: str
    timestamp: str
    version: str = "0.1.0"

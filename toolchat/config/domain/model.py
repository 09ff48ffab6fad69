"""Language-model configuration model."""

from pydantic import BaseModel, Field

DEFAULT_MODEL = "anthropic/claude-3-5-sonnet-20241022"
DEFAULT_MAX_OUTPUT_TOKENS = 1024


class ModelConfig(BaseModel, frozen=True):
    name: str = Field(default=DEFAULT_MODEL, min_length=1)
    max_output_tokens: int = Field(default=DEFAULT_MAX_OUTPUT_TOKENS, ge=1)
    temperature: float | None = Field(default=None, ge=0.0)

# src/ragnotes/settings.py
"""Configuration management for ragnotes.

This module contains behavioral settings that apply regardless of which
LLM provider is used. Settings are passed programmatically - the library
does not read from environment variables.

For applications that want env-based config, read env vars at the
application layer (see ragnotes.config) and pass values explicitly.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

# Rate limit profile definitions
RATE_LIMIT_PROFILES: dict[str, dict[str, int]] = {
    "aggressive": {
        "max_concurrent_embeddings": 10,
        "num_retries": 5,
    },
    "conservative": {
        "max_concurrent_embeddings": 1,
        "num_retries": 5,
    },
}


class Settings(BaseModel):
    """Behavioral settings for ragnotes.

    Example:
        settings = Settings(chunk_size=800, chunk_overlap=100)

        # Or use a rate limit profile for free API tiers
        settings = Settings.with_profile("conservative")
    """

    # Chunking
    chunk_size: int = Field(default=500, gt=0)
    chunk_overlap: int = Field(default=50, ge=0)

    # Embedding vectors must have exactly this length (None disables the check)
    embedding_dimensions: int | None = 768

    # Retrieval and answer synthesis
    default_k: int = 5
    synthesis_prompt: str | None = None
    synthesis_temperature: float | None = 0.3

    # Flashcards
    flashcard_prompt: str | None = None
    flashcard_temperature: float | None = 0.2

    # Concurrency of per-chunk embedding calls inside one reindex
    max_concurrent_embeddings: int = Field(default=5, ge=1)

    # Retry configuration (LiteLLM handles exponential backoff for RateLimitError)
    num_retries: int = 3

    # Background indexing
    serialize_reindex: bool = True
    task_max_attempts: int = Field(default=3, ge=1)

    @model_validator(mode="after")
    def _check_overlap(self) -> Settings:
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than "
                f"chunk_size ({self.chunk_size})"
            )
        return self

    @classmethod
    def with_profile(
        cls,
        profile: Literal["aggressive", "conservative"],
        **overrides: Any,
    ) -> Settings:
        """Create Settings with a rate limit profile.

        Profiles bundle settings optimized for different API tier limits:
        - "aggressive": For paid API tiers with high rate limits
        - "conservative": For free tiers or APIs with strict rate limits

        Args:
            profile: The rate limit profile to use.
            **overrides: Additional settings to override profile defaults.

        Example:
            settings = Settings.with_profile("conservative", default_k=3)
        """
        if profile not in RATE_LIMIT_PROFILES:
            raise ValueError(
                f"Unknown profile '{profile}'. "
                f"Available profiles: {list(RATE_LIMIT_PROFILES.keys())}"
            )

        profile_settings: dict[str, Any] = RATE_LIMIT_PROFILES[profile].copy()
        profile_settings.update(overrides)
        return cls(**profile_settings)

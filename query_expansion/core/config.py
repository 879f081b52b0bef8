"""
Application configuration management.

This module centralizes the settings used to build the default
language model, loading values from environment variables with
sensible defaults.

Configuration categories:
- LLM settings (API key, model name, sampling parameters)
- Reformulation parameters for the default reformulator

Transformer classes never read these values themselves; they are
only consumed by the module-level factories in ``query_expansion.llm``.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Config:
    """
    Central configuration for the query expansion stage.

    All configuration values are loaded from environment variables.

    Attributes:
        GROQ_API_KEY: API key for Groq LLM service.
        GROQ_MODEL: Chat model used for reformulation.
        LLM_TEMPERATURE: Sampling temperature for reformulation calls.
        LLM_MAX_TOKENS: Upper bound on response length.
        NUM_REFORMULATED_QUERIES: Rewrites requested by the default reformulator.
    """

    GROQ_API_KEY: str = field(default_factory=lambda: os.getenv("GROQ_API_KEY"))
    GROQ_MODEL: str = field(
        default_factory=lambda: os.getenv("GROQ_MODEL", "llama-3.1-8b-instant")
    )
    LLM_TEMPERATURE: float = field(
        default_factory=lambda: float(os.getenv("LLM_TEMPERATURE", "0.7"))
    )
    LLM_MAX_TOKENS: int = field(
        default_factory=lambda: int(os.getenv("LLM_MAX_TOKENS", "512"))
    )
    NUM_REFORMULATED_QUERIES: int = field(
        default_factory=lambda: int(os.getenv("NUM_REFORMULATED_QUERIES", "3"))
    )


settings = Config()

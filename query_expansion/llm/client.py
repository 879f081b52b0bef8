"""
Default language model client.

Builds the Groq chat model and the module-level reformulator on top of it.
Transformers accept any LangChain language model, so this is only
the application's default wiring.
"""

import logging
from typing import Optional

from langchain_groq import ChatGroq

from query_expansion.core.config import settings
from query_expansion.llm.reformulator import ExpandingQueryTransformer

logger = logging.getLogger(__name__)

# Module-level singletons
_chat_model: Optional[ChatGroq] = None
_reformulator: Optional[ExpandingQueryTransformer] = None


def create_chat_model(
    model_name: Optional[str] = None,
    temperature: Optional[float] = None,
) -> ChatGroq:
    """
    Create a Groq chat model.

    Args:
        model_name: Groq model to use (default: from settings)
        temperature: LLM temperature (default: from settings)
    """
    model_name = model_name or settings.GROQ_MODEL
    temperature = temperature if temperature is not None else settings.LLM_TEMPERATURE

    logger.debug(f"Creating ChatGroq client: model={model_name} temperature={temperature}")
    return ChatGroq(
        model=model_name,
        temperature=temperature,
        max_tokens=settings.LLM_MAX_TOKENS,
        api_key=settings.GROQ_API_KEY,
    )


def get_chat_model() -> ChatGroq:
    """Get or create the singleton ChatGroq instance."""
    global _chat_model
    if _chat_model is None:
        _chat_model = create_chat_model()
    return _chat_model


def get_reformulator() -> ExpandingQueryTransformer:
    """Get or create the singleton reformulator backed by the default chat model."""
    global _reformulator
    if _reformulator is None:
        _reformulator = ExpandingQueryTransformer(
            get_chat_model(),
            n=settings.NUM_REFORMULATED_QUERIES,
        )
    return _reformulator

"""Test configuration and fixtures for the query expansion test suite."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

from query_expansion.core.schemas import Metadata, Query


# =============================================================================
# Pytest Fixtures
# =============================================================================

@pytest.fixture
def spanish_response() -> str:
    """Model output with one enumerated line and one blank line."""
    return (
        "1. How can I study Spanish?\n"
        "\n"
        "What's the best way to learn the Spanish language?\n"
        "Tips for learning Spanish"
    )


@pytest.fixture
def metadata() -> Metadata:
    """Metadata as the chat layer would attach it."""
    return Metadata(
        user_message="How to learn Spanish?",
        chat_memory_id="conversation-1",
    )


@pytest.fixture
def query(metadata: Metadata) -> Query:
    """A query carrying metadata."""
    return Query(text="How to learn Spanish?", metadata=metadata)


@pytest.fixture
def mock_chat_model(spanish_response: str) -> MagicMock:
    """Chat model stub returning the Spanish rewrites for every call."""
    model = MagicMock()
    model.invoke.return_value = AIMessage(content=spanish_response)
    model.ainvoke = AsyncMock(return_value=AIMessage(content=spanish_response))
    return model

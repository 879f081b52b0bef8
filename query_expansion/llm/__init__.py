"""
LLM module for query reformulation.

This module handles interaction with large language models for
generating semantically meaningful search queries from user input.

Key responsibilities:
- Query expansion into multiple semantic variants
- Compression of a conversation and follow-up into one query
- Parsing of line-per-query model output

The Groq-backed defaults (`get_chat_model`, `get_reformulator`) live in
``query_expansion.llm.client`` and are only loaded when imported from there.
"""

from query_expansion.llm.compressor import CompressingQueryTransformer
from query_expansion.llm.parser import LineListOutputParser
from query_expansion.llm.reformulator import (
    DEFAULT_N,
    DEFAULT_PROMPT_TEMPLATE,
    ExpandingQueryTransformer,
)

__all__ = [
    "ExpandingQueryTransformer",
    "CompressingQueryTransformer",
    "LineListOutputParser",
    "DEFAULT_N",
    "DEFAULT_PROMPT_TEMPLATE",
]

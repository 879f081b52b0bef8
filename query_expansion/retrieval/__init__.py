"""
Retrieval-side contracts for query transformation.

The retrieval stage consumes queries through the QueryTransformer
protocol; the LLM-backed strategies live in ``query_expansion.llm``.
"""

from query_expansion.retrieval.transformer import DefaultQueryTransformer, QueryTransformer

__all__ = [
    "QueryTransformer",
    "DefaultQueryTransformer",
]

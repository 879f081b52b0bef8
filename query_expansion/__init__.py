"""
Query expansion stage for retrieval-augmented generation.

Rewrites a user query into several alternative phrasings with an LLM
so that retrieval can run multiple searches and improve recall.
"""

from query_expansion.core.schemas import Metadata, Query, ReformulationConfig
from query_expansion.llm.compressor import CompressingQueryTransformer
from query_expansion.llm.parser import LineListOutputParser
from query_expansion.llm.reformulator import ExpandingQueryTransformer
from query_expansion.retrieval.transformer import DefaultQueryTransformer, QueryTransformer

__all__ = [
    "Query",
    "Metadata",
    "ReformulationConfig",
    "QueryTransformer",
    "DefaultQueryTransformer",
    "ExpandingQueryTransformer",
    "CompressingQueryTransformer",
    "LineListOutputParser",
]

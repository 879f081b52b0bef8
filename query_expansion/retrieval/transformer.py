"""
Query transformer contract.

Every strategy that rewrites a query before retrieval (expansion,
compression, or none at all) exposes the same single operation, so
the retrieval stage can swap strategies without caring which one it
holds.
"""

from typing import List, Protocol, runtime_checkable

from query_expansion.core.schemas import Query


@runtime_checkable
class QueryTransformer(Protocol):
    """Turns one query into the queries that should be searched."""

    def transform(self, query: Query) -> List[Query]: ...


class DefaultQueryTransformer:
    """Searches the query as given."""

    def transform(self, query: Query) -> List[Query]:
        return [query]

    async def atransform(self, query: Query) -> List[Query]:
        return [query]

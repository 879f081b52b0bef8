"""
LLM-based query reformulation.

This module uses an LLM to expand a user query into multiple
semantically equivalent search queries. Each rewrite is searched
separately downstream, which improves recall by matching documents
that use different vocabulary than the user.

The number of rewrites requested is a hint to the model, not a
guarantee: whatever non-blank lines the model returns become queries,
in the order returned.
"""

import logging
from typing import List, Optional, Union

from langchain_core.language_models import BaseLanguageModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import PromptTemplate

from query_expansion.core.schemas import Query, ReformulationConfig
from query_expansion.llm.parser import LineListOutputParser
from query_expansion.llm.prompts import get_expansion_prompt, to_prompt_template

logger = logging.getLogger(__name__)

DEFAULT_N = 3
DEFAULT_PROMPT_TEMPLATE = get_expansion_prompt()


class ExpandingQueryTransformer:
    """
    Expands one query into several rewrites using a single LLM call.

    The prompt template receives two variables: `query` (the original
    text, verbatim) and `n` (the number of rewrites requested). Each
    non-blank line of the response becomes a new Query carrying the
    original query's metadata.

    Instances hold no mutable state and may be shared between threads
    or tasks.
    """

    def __init__(
        self,
        chat_model: BaseLanguageModel,
        prompt_template: Optional[Union[str, PromptTemplate]] = None,
        n: Optional[int] = None,
    ):
        """
        Initialize the reformulator.

        Args:
            chat_model: LangChain chat model or LLM that generates the rewrites
            prompt_template: Template with `query` and `n` placeholders
                (default: DEFAULT_PROMPT_TEMPLATE)
            n: Number of rewrites to request, must be positive (default: 3)

        Raises:
            ValueError: If `chat_model` is None, `n` is not positive or the
                template is blank
        """
        if chat_model is None:
            raise ValueError("chat_model must not be None")

        config = ReformulationConfig(prompt_template=prompt_template, n=n)

        self.chat_model = chat_model
        self.prompt_template = to_prompt_template(
            config.prompt_template, DEFAULT_PROMPT_TEMPLATE
        )
        self.n = config.n if config.n is not None else DEFAULT_N

        self.output_parser = LineListOutputParser()

    @classmethod
    def from_config(
        cls, chat_model: BaseLanguageModel, config: ReformulationConfig
    ) -> "ExpandingQueryTransformer":
        """Build from a ReformulationConfig, defaulting the fields it leaves unset."""
        return cls(chat_model, prompt_template=config.prompt_template, n=config.n)

    def transform(self, query: Query) -> List[Query]:
        """
        Expand a query into its rewrites.

        Args:
            query: Query to expand

        Returns:
            Rewritten queries in response order. May hold more or fewer
            than `n` items, or none at all.
        """
        prompt = self.create_prompt(query)
        response = self.chat_model.invoke(prompt)
        return self._to_queries(query, response)

    async def atransform(self, query: Query) -> List[Query]:
        """Async variant of transform()."""
        prompt = self.create_prompt(query)
        response = await self.chat_model.ainvoke(prompt)
        return self._to_queries(query, response)

    def create_prompt(self, query: Query) -> str:
        """Render the prompt text for a query."""
        prompt = self.prompt_template.format(query=query.text, n=self.n)
        logger.debug(f"Expansion prompt built: {len(prompt)} chars, n={self.n}")
        return prompt

    def parse(self, response_text: str) -> List[str]:
        """Split a response into non-blank lines."""
        return self.output_parser.parse(response_text)

    def _to_queries(self, query: Query, response) -> List[Query]:
        response_text = StrOutputParser().invoke(response)
        lines = self.parse(response_text)
        logger.debug(f"Model returned {len(lines)} queries (requested {self.n})")
        return [Query(text=line, metadata=query.metadata) for line in lines]

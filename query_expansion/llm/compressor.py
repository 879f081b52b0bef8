"""
LLM-based query compression.

Follow-up questions in a conversation often lean on earlier turns
("and what about its license?"). This module asks an LLM to fold the
conversation into the new query so it can be searched on its own.
"""

import logging
from typing import List, Optional, Sequence, Union

from langchain_core.language_models import BaseLanguageModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import PromptTemplate

from query_expansion.core.schemas import Query
from query_expansion.llm.prompts import get_compression_prompt, to_prompt_template

logger = logging.getLogger(__name__)

DEFAULT_PROMPT_TEMPLATE = get_compression_prompt()


def _message_text(message: BaseMessage) -> str:
    if isinstance(message.content, str):
        return message.content
    parts = []
    for part in message.content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


def format_chat_memory(chat_memory: Sequence[BaseMessage]) -> str:
    """
    Render conversation history as `User: ...` / `AI: ...` lines.

    System and tool messages are skipped, as are AI messages that only
    request tool calls.
    """
    lines = []
    for message in chat_memory:
        if isinstance(message, HumanMessage):
            lines.append(f"User: {_message_text(message)}")
        elif isinstance(message, AIMessage) and not message.tool_calls:
            lines.append(f"AI: {_message_text(message)}")
    return "\n".join(lines)


class CompressingQueryTransformer:
    """
    Condenses chat history and a new query into one standalone query.

    The conversation is read from `query.metadata.chat_memory`. Without
    metadata or history there is nothing to compress and the query is
    returned as is, without calling the model.
    """

    def __init__(
        self,
        chat_model: BaseLanguageModel,
        prompt_template: Optional[Union[str, PromptTemplate]] = None,
    ):
        """
        Args:
            chat_model: LangChain chat model or LLM that writes the query
            prompt_template: Template with `chat_memory` and `query`
                placeholders (default: DEFAULT_PROMPT_TEMPLATE)
        """
        if chat_model is None:
            raise ValueError("chat_model must not be None")
        self.chat_model = chat_model
        self.prompt_template = to_prompt_template(prompt_template, DEFAULT_PROMPT_TEMPLATE)

    def transform(self, query: Query) -> List[Query]:
        chat_memory = self._chat_memory(query)
        if not chat_memory:
            return [query]

        prompt = self.create_prompt(query, chat_memory)
        response = self.chat_model.invoke(prompt)
        return [self._to_query(query, response)]

    async def atransform(self, query: Query) -> List[Query]:
        chat_memory = self._chat_memory(query)
        if not chat_memory:
            return [query]

        prompt = self.create_prompt(query, chat_memory)
        response = await self.chat_model.ainvoke(prompt)
        return [self._to_query(query, response)]

    def create_prompt(self, query: Query, chat_memory: Sequence[BaseMessage]) -> str:
        return self.prompt_template.format(
            query=query.text,
            chat_memory=format_chat_memory(chat_memory),
        )

    @staticmethod
    def _chat_memory(query: Query) -> Optional[List[BaseMessage]]:
        if query.metadata is None:
            return None
        return query.metadata.chat_memory

    def _to_query(self, query: Query, response) -> Query:
        compressed = StrOutputParser().invoke(response)
        logger.debug(f"Compressed query built: {len(compressed)} chars")
        return Query(text=compressed, metadata=query.metadata)

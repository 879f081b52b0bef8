"""
Prompt templates for LLM interactions.

This module contains the prompt templates used for query
reformulation. Prompts are designed to elicit plain, search-oriented
outputs that need no further parsing beyond line splitting.

Templates use LangChain's f-string syntax. Substituted values are
inserted verbatim, so braces inside a user query are not re-parsed.
"""

from typing import Optional, Union

from langchain_core.prompts import PromptTemplate

DEFAULT_EXPANSION_PROMPT = (
    "Generate {n} different versions of a provided user query. "
    "Each version should be worded differently, using synonyms or alternative sentence structures, "
    "but they should all retain the original meaning. "
    "These versions will be used to retrieve relevant documents. "
    "It is very important to provide each query version on a separate line, "
    "without enumerations, hyphens, or any additional formatting!\n"
    "User query: {query}"
)

DEFAULT_COMPRESSION_PROMPT = (
    "Read and understand the conversation between the User and the AI. "
    "Then, analyze the new query from the User. "
    "Identify all relevant details, terms, and context from both the conversation and the new query. "
    "Reformulate this query into a clear, concise, and self-contained format suitable for information retrieval.\n"
    "\n"
    "Conversation:\n"
    "{chat_memory}\n"
    "\n"
    "User query: {query}\n"
    "\n"
    "It is very important that you provide only reformulated query and nothing else! "
    "Do not prepend a query with anything!"
)


def get_expansion_prompt() -> PromptTemplate:
    """Default prompt asking for `n` rewrites of `query`, one per line."""
    return PromptTemplate.from_template(DEFAULT_EXPANSION_PROMPT)


def get_compression_prompt() -> PromptTemplate:
    """Default prompt condensing `chat_memory` and `query` into one query."""
    return PromptTemplate.from_template(DEFAULT_COMPRESSION_PROMPT)


def to_prompt_template(
    template: Optional[Union[str, PromptTemplate]],
    default: PromptTemplate,
) -> PromptTemplate:
    """
    Resolve a user-supplied template.

    Args:
        template: Template string, ready PromptTemplate, or None
        default: Template used when `template` is None

    Returns:
        PromptTemplate ready for formatting

    Raises:
        ValueError: If `template` is a blank string
    """
    if template is None:
        return default
    if isinstance(template, PromptTemplate):
        return template
    if not template.strip():
        raise ValueError("prompt_template cannot be blank")
    return PromptTemplate.from_template(template)

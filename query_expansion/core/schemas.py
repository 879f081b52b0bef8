"""
Pydantic schemas for the data models of the query expansion stage.

This module defines the data structures passed between the transformers
and their callers:
- Query and its carried-through metadata
- Reformulation settings for model-backed transformers
"""

from typing import List, Optional, Union

from langchain_core.messages import BaseMessage
from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel, Field, StrictInt, field_validator


class Metadata(BaseModel):
    """
    Caller-defined context attached to a query.

    Transformers carry the instance through to every derived query
    by reference. Only the compressing transformer looks inside it.

    Attributes:
        user_message: The raw user message the query was taken from.
        chat_memory_id: Identifier of the conversation.
        chat_memory: Previous messages of the conversation, oldest first.

    Any other keyword (routing hints, request identifiers) is kept as an
    extra field and travels with the metadata unchanged.
    """

    user_message: Optional[str] = None
    chat_memory_id: Optional[str] = None
    chat_memory: Optional[List[BaseMessage]] = None

    model_config = {"frozen": True, "extra": "allow"}


class Query(BaseModel):
    """
    A single retrieval query.

    Attributes:
        text: The query text, never blank
        metadata: Optional context carried through the pipeline
    """

    text: str
    metadata: Optional[Metadata] = None

    model_config = {"frozen": True}

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text cannot be blank")
        return value


class ReformulationConfig(BaseModel):
    """
    Tunable parameters of a model-backed transformer.

    Fields left as None are resolved to the transformer's defaults
    when the transformer is constructed.
    """

    prompt_template: Optional[Union[str, PromptTemplate]] = None
    n: Optional[StrictInt] = Field(default=None, gt=0)

    model_config = {"frozen": True}

    @field_validator("prompt_template")
    @classmethod
    def _template_not_blank(cls, value):
        if isinstance(value, str) and not value.strip():
            raise ValueError("prompt_template cannot be blank")
        return value

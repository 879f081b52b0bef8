"""Tests for the pydantic schemas."""

import pytest
from langchain_core.messages import HumanMessage
from langchain_core.prompts import PromptTemplate
from pydantic import ValidationError

from query_expansion.core.schemas import Metadata, Query, ReformulationConfig


class TestQuery:

    def test_text_and_metadata(self, metadata):
        query = Query(text="hybrid search", metadata=metadata)

        assert query.text == "hybrid search"
        assert query.metadata is metadata

    def test_metadata_is_optional(self):
        assert Query(text="hybrid search").metadata is None

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_is_rejected(self, text):
        with pytest.raises(ValidationError):
            Query(text=text)

    def test_text_is_not_stripped(self):
        assert Query(text="  padded ").text == "  padded "

    def test_is_immutable(self, query):
        with pytest.raises(ValidationError):
            query.text = "changed"


class TestMetadata:

    def test_holds_chat_memory(self):
        memory = [HumanMessage(content="hi")]

        metadata = Metadata(chat_memory_id="c-9", chat_memory=memory)

        assert metadata.chat_memory[0].content == "hi"
        assert metadata.user_message is None

    def test_is_immutable(self, metadata):
        with pytest.raises(ValidationError):
            metadata.chat_memory_id = "other"

    def test_keeps_caller_defined_fields(self):
        metadata = Metadata(chat_memory_id="c", routing_hint="eu-west")

        assert metadata.routing_hint == "eu-west"
        assert metadata.model_dump() == {
            "user_message": None,
            "chat_memory_id": "c",
            "chat_memory": None,
            "routing_hint": "eu-west",
        }

    def test_caller_defined_fields_are_immutable(self):
        metadata = Metadata(routing_hint="eu-west")

        with pytest.raises(ValidationError):
            metadata.routing_hint = "us-east"


class TestReformulationConfig:

    def test_all_fields_optional(self):
        config = ReformulationConfig()

        assert config.prompt_template is None
        assert config.n is None

    @pytest.mark.parametrize("n", [0, -3, True, False, "3", 3.0])
    def test_n_must_be_a_positive_int(self, n):
        with pytest.raises(ValidationError):
            ReformulationConfig(n=n)

    def test_n_accepts_int(self):
        assert ReformulationConfig(n=5).n == 5

    def test_accepts_string_or_prompt_template(self):
        template = PromptTemplate.from_template("{query} x{n}")

        assert ReformulationConfig(prompt_template="{query}").prompt_template == "{query}"
        assert ReformulationConfig(prompt_template=template).prompt_template is template

    def test_blank_template_is_rejected(self):
        with pytest.raises(ValidationError):
            ReformulationConfig(prompt_template="  ")

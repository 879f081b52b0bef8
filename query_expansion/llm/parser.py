"""
Output parsing for reformulation responses.

The model is asked for one query per line. This parser only splits and
drops blank lines; numbering, bullets or punctuation the model adds
despite the prompt are kept as part of the query text.
"""

from typing import List

from langchain_core.output_parsers import BaseOutputParser


class LineListOutputParser(BaseOutputParser[List[str]]):
    """
    Splits a model response into candidate queries.

    Lines are split on "\\n" only and returned in response order.
    Empty and whitespace-only lines are dropped; every other line is
    returned unchanged.
    """

    def parse(self, text: str) -> List[str]:
        return [line for line in text.split("\n") if line.strip()]

    @property
    def _type(self) -> str:
        return "line_list"

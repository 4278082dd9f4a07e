"""
Schemas - Search Models

Pydantic models for the search tool input and its results.
"""

from pydantic import BaseModel, StrictStr, field_validator
from typing import Any


TOP_K_DEFAULT = 3
TOP_K_MIN, TOP_K_MAX = 1, 10
MAX_CHARS_DEFAULT = 4000
MAX_CHARS_MIN, MAX_CHARS_MAX = 100, 10000


def _bounded_int(value: Any, default: int, low: int, high: int) -> int:
    # bool is an int subclass but is not a number to MCP clients
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value != value:  # NaN
        return default
    if value in (float("inf"), float("-inf")):
        return high if value > 0 else low
    return max(low, min(high, int(value)))


class SearchRequest(BaseModel):
    """Validated arguments of a search_documents call."""
    query: StrictStr
    top_k: int = TOP_K_DEFAULT
    max_chars: int = MAX_CHARS_DEFAULT

    model_config = {"extra": "ignore"}

    @field_validator("top_k", mode="before")
    @classmethod
    def _coerce_top_k(cls, value: Any) -> int:
        return _bounded_int(value, TOP_K_DEFAULT, TOP_K_MIN, TOP_K_MAX)

    @field_validator("max_chars", mode="before")
    @classmethod
    def _coerce_max_chars(cls, value: Any) -> int:
        return _bounded_int(value, MAX_CHARS_DEFAULT, MAX_CHARS_MIN, MAX_CHARS_MAX)


class DocumentSummary(BaseModel):
    """Single search result returned to the MCP client."""
    id: str
    title: str
    text: str
    url: str

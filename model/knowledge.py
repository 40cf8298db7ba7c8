# model/knowledge.py
from pydantic import BaseModel, ConfigDict, TypeAdapter


class SearchResult(BaseModel):
    """One precomputed snippet with its citation metadata."""

    model_config = ConfigDict(frozen=True)

    rank: int
    location: str
    chapter: str | None = None
    section_num: str | None = None
    page: int | None = None
    block_type: str | None = None
    chunk_id: str | None = None
    score: float
    content_preview: str | None = None
    full_content: str


class VerificationEntry(BaseModel):
    """
    Canonical query -> answer-context record.
    `search_results` arrive pre-ranked, most relevant first.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    description: str | None = None
    expected_keywords: tuple[str, ...] | None = None
    answer: str | None = None
    search_results: tuple[SearchResult, ...] = ()


# Shape of the backing JSON document.
VerificationDocument = TypeAdapter(list[VerificationEntry])

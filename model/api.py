# model/api.py
from pydantic import BaseModel, Field
from model.knowledge import SearchResult
from model.message import Message
from util.enums import LoadState


class InjectContextRequest(BaseModel):
    messages: list[Message]
    topK: int | None = Field(default=None, ge=1)


class InjectContextResponse(BaseModel):
    messages: list[Message]
    injected: bool


class SearchRequest(BaseModel):
    query: str
    topK: int | None = Field(default=None, ge=1)


class SearchResponse(BaseModel):
    results: list[SearchResult]
    description: str


class KnowledgeStatusResponse(BaseModel):
    state: LoadState
    entries: int
    dataPath: str

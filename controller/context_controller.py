# controller/context_controller.py
import logging
from fastapi import APIRouter, Depends, status
from config.settings import settings
from controller.controller_dependencies import get_context_injector, get_knowledge_store
from model.api import (
    InjectContextRequest,
    InjectContextResponse,
    KnowledgeStatusResponse,
    SearchRequest,
    SearchResponse,
)
from repository.knowledge_store import KnowledgeStore
from service.context_injector import ContextInjector
from util.constants import InternalURIs
from util.enums import ErrorMessage
from util.errors import AppError

logger = logging.getLogger(__name__)

context_router = APIRouter()


@context_router.post(
    InternalURIs.INJECT_CONTEXT,
    response_model=InjectContextResponse,
    status_code=status.HTTP_200_OK,
)
def inject_context(
    payload: InjectContextRequest,
    injector: ContextInjector = Depends(get_context_injector),
) -> InjectContextResponse:
    top_k = payload.topK or settings.RAG_TOP_K
    out = injector.inject_rag_context(payload.messages, top_k)
    return InjectContextResponse(messages=out, injected=out is not payload.messages)


@context_router.post(InternalURIs.SEARCH, response_model=SearchResponse)
def search(
    payload: SearchRequest,
    store: KnowledgeStore = Depends(get_knowledge_store),
) -> SearchResponse:
    if not payload.query.strip():
        raise AppError.of(ErrorMessage.EMPTY_QUERY)
    results = store.search(payload.query, payload.topK or settings.RAG_TOP_K)
    return SearchResponse(
        results=results, description=store.get_description(payload.query)
    )


@context_router.get(
    InternalURIs.KNOWLEDGE_STATUS, response_model=KnowledgeStatusResponse
)
def knowledge_status(
    store: KnowledgeStore = Depends(get_knowledge_store),
) -> KnowledgeStatusResponse:
    return KnowledgeStatusResponse(
        state=store.state, entries=store.entry_count, dataPath=store.data_path
    )

# controller/controller_dependencies.py
from functools import lru_cache
from fastapi import Depends
from config.settings import settings
from repository.knowledge_store import KnowledgeStore
from service.context_injector import ContextInjector


@lru_cache(maxsize=1)
def get_knowledge_store() -> KnowledgeStore:
    # One store per process; tests override this dependency.
    return KnowledgeStore(settings.RAG_DATA_PATH)


def get_context_injector(
    store: KnowledgeStore = Depends(get_knowledge_store),
) -> ContextInjector:
    return ContextInjector(store)

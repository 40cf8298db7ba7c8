# service/context_injector.py
import logging
from typing import Sequence
from model.knowledge import SearchResult
from model.message import Message
from repository.knowledge_store import KnowledgeStore
from util.constants import DEFAULT_TOP_K, USER_ROLE

logger = logging.getLogger(__name__)


def format_context(results: Sequence[SearchResult]) -> str:
    return "\n\n".join(
        f"[Source {i + 1}: {r.location}]\n{r.full_content}"
        for i, r in enumerate(results)
    )


def build_rag_user_message(query: str, description: str, context: str) -> str:
    aspect = f"Specific Aspect: {description}\n" if description else ""
    return (
        f"[Context]\n{context}\n\n"
        f"[User Query]\n"
        f"Question: {query}\n"
        f"{aspect}"
        f"Answer:"
    )


def _last_user_index(messages: Sequence[Message]) -> int:
    for i in range(len(messages) - 1, -1, -1):
        if messages[i].from_ == USER_ROLE:
            return i
    return -1


class ContextInjector:
    """
    Rewrites the last user message of a conversation so it carries the
    precomputed context for its question. Every miss leaves the conversation
    untouched and returns the very same list.
    """

    def __init__(self, store: KnowledgeStore) -> None:
        self._store = store

    def inject_rag_context(
        self, messages: list[Message], top_k: int = DEFAULT_TOP_K
    ) -> list[Message]:
        idx = _last_user_index(messages)
        if idx == -1:
            logger.info("rag.inject.skip reason=no_user_message")
            return messages

        target = messages[idx]
        query = target.text or ""
        if not query.strip():
            return messages

        results = self._store.search(query, top_k)
        if not results:
            logger.info("rag.inject.skip reason=no_context query=%r", query)
            return messages

        context = format_context(results)
        description = self._store.get_description(query)
        augmented = build_rag_user_message(query, description, context)

        logger.info("rag.inject.ok chunks=%d query=%r", len(results), query)

        out = list(messages)
        out[idx] = target.model_copy(update={"content": augmented})
        return out

# repository/knowledge_store.py
import logging
import os
import threading
from pydantic import ValidationError
from config.settings import settings
from model.knowledge import SearchResult, VerificationDocument, VerificationEntry
from util import functions
from util.constants import DEFAULT_TOP_K, FUZZY_MATCH_THRESHOLD
from util.enums import LoadState
from util.timing import timed

logger = logging.getLogger(__name__)


class KnowledgeStore:
    """
    Flow:
    - Holds the offline verification entries read from one JSON document.
    - Loaded lazily on first lookup (or eagerly at startup); a successful load
      happens once, a missing or malformed file is retried on the next call.
    - Lookups are exact on the normalized query, then token-overlap fuzzy.
    - Never raises for a bad data file; an unloaded store just finds nothing.
    """

    def __init__(self, data_path: str | None = None) -> None:
        self._path = data_path or settings.RAG_DATA_PATH
        self._entries: tuple[VerificationEntry, ...] = ()
        self._index: dict[str, VerificationEntry] = {}
        self._state = LoadState.UNLOADED
        self._lock = threading.Lock()

    @property
    def data_path(self) -> str:
        return self._path

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    def is_loaded(self) -> bool:
        return self._state is LoadState.LOADED

    def load(self) -> None:
        if self._state is LoadState.LOADED:
            return
        with self._lock:
            if self._state is LoadState.LOADED:
                return
            self._load_locked()

    def _load_locked(self) -> None:
        if not os.path.exists(self._path):
            logger.warning("rag.load.missing path=%s", self._path)
            return

        with timed(logger, "rag.load", path=self._path) as fields:
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    raw = f.read()
                entries = VerificationDocument.validate_json(raw)
            except (OSError, UnicodeDecodeError, ValidationError) as e:
                logger.error(
                    "rag.load.error path=%s err=%s", self._path, type(e).__name__
                )
                logger.debug("rag.load.error.detail %s", e)
                self._state = LoadState.FAILED
                return

            index: dict[str, VerificationEntry] = {}
            for entry in entries:
                # Later duplicates overwrite earlier ones.
                index[functions.normalize_query(entry.query)] = entry

            self._entries = tuple(entries)
            self._index = index
            self._state = LoadState.LOADED
            fields["count"] = len(entries)

        logger.info("rag.load.ok count=%d", len(self._entries))

    def _ensure_loaded(self) -> None:
        if self._state is not LoadState.LOADED:
            self.load()

    def search(self, query: str, top_k: int = DEFAULT_TOP_K) -> list[SearchResult]:
        """
        Return at most `top_k` results of the best matching entry, in their
        stored rank order. Exact match wins outright; otherwise the entry with
        the highest token overlap is used if it scores above the threshold.
        """
        self._ensure_loaded()
        limit = max(top_k, 0)
        normalized = functions.normalize_query(query)

        exact = self._index.get(normalized)
        if exact is not None:
            logger.info("rag.search.exact query=%r", query)
            return list(exact.search_results[:limit])

        query_tokens = functions.tokenize(normalized)
        best: VerificationEntry | None = None
        best_score = 0.0
        for entry in self._entries:
            entry_tokens = functions.tokenize(functions.normalize_query(entry.query))
            score = functions.overlap_score(query_tokens, entry_tokens)
            # Strictly greater: earlier entries win ties.
            if score > best_score:
                best_score = score
                best = entry

        if best is not None and best_score > FUZZY_MATCH_THRESHOLD:
            logger.info(
                "rag.search.fuzzy query=%r matched=%r score=%.2f",
                query,
                best.query,
                best_score,
            )
            return list(best.search_results[:limit])

        logger.info("rag.search.miss query=%r", query)
        return []

    def get_description(self, query: str) -> str:
        """Exact-match only; fuzzy hits have no description."""
        self._ensure_loaded()
        exact = self._index.get(functions.normalize_query(query))
        if exact is None:
            return ""
        return exact.description or ""

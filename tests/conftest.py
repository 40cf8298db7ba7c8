import json
import logging
import pytest
from repository.knowledge_store import KnowledgeStore


def _result(rank: int, location: str, content: str, score: float = 0.9) -> dict:
    return {
        "rank": rank,
        "location": location,
        "score": score,
        "full_content": content,
    }


SAMPLE_ENTRIES = [
    {
        "query": "What is photosynthesis?",
        "description": "light reactions",
        "expected_keywords": ["chlorophyll", "light"],
        "answer": "Plants turn light into sugar.",
        "search_results": [
            _result(1, "Ch.3 p.41", "Photosynthesis converts light energy."),
            _result(2, "Ch.3 p.42", "Chlorophyll absorbs red and blue light."),
            _result(3, "Ch.3 p.45", "The Calvin cycle fixes carbon."),
            _result(4, "Ch.4 p.50", "Stomata regulate gas exchange."),
        ],
    },
    {
        "query": "How do volcanoes erupt",
        "description": "",
        "search_results": [
            _result(1, "Ch.9 p.201", "Magma rises through the crust."),
        ],
    },
]


@pytest.fixture
def write_data(tmp_path):
    def _write(entries, name: str = "verification_data.json") -> str:
        path = tmp_path / name
        path.write_text(json.dumps(entries), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def data_path(write_data) -> str:
    return write_data(SAMPLE_ENTRIES)


@pytest.fixture
def store(data_path) -> KnowledgeStore:
    return KnowledgeStore(data_path)


@pytest.fixture(autouse=True)
def _keep_pytest_log_handlers(monkeypatch):
    # App startup would otherwise swap out the root handlers pytest captures with.
    monkeypatch.setattr(logging.getLogger(), "_context_shim_inited", True, raising=False)

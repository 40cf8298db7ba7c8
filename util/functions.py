# util/functions.py
def normalize_query(text: str) -> str:
    """
    Lowercase and strip surrounding whitespace. Internal whitespace is kept
    as-is, so "a  b" and "a b" are different keys.
    """
    return text.lower().strip()


def tokenize(text: str) -> set[str]:
    """
    - Split on runs of whitespace.
    - Drop single-character tokens.
    """
    return {w for w in text.split() if len(w) > 1}


def overlap_score(query_tokens: set[str], entry_tokens: set[str]) -> float:
    overlap = len(query_tokens & entry_tokens)
    return overlap / max(len(query_tokens), len(entry_tokens), 1)

# util/timing.py
import time
from contextlib import contextmanager
from typing import Iterator, Any
import logging


@contextmanager
def timed(logger: logging.Logger, name: str, **kv: Any) -> Iterator[dict]:
    """
    Usage:
      with timed(logger, "rag.load", path=p) as fields:
          fields["count"] = 12
    Emits one DEBUG on exit: "<name>.done ms=<int> key=val ..."
    Keys added to the yielded dict during the block are appended too.
    """
    t0 = time.perf_counter()
    fields: dict = dict(kv)
    try:
        yield fields
    finally:
        dt_ms = int((time.perf_counter() - t0) * 1000)
        suffix = "".join(f" {k}={v}" for k, v in fields.items())
        logger.debug("%s.done ms=%d%s", name, dt_ms, suffix)

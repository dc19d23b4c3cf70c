"""Identifier and clock providers injected into the analyzers"""

import threading
import uuid
from collections import defaultdict
from datetime import datetime, timezone
from typing import Callable, Dict

IdFactory = Callable[[str], str]
Clock = Callable[[], datetime]


class SequentialIds:
    """
    Deterministic id generator.

    Every id kind ("act", "plot-point", "shot", ...) has its own counter, so
    the ids handed to one stage do not depend on how many ids other stages
    asked for. This keeps results identical when stages run concurrently.
    """

    def __init__(self):
        self._counters: Dict[str, int] = defaultdict(int)
        self._lock = threading.Lock()

    def __call__(self, kind: str) -> str:
        with self._lock:
            self._counters[kind] += 1
            return f"{kind}-{self._counters[kind]}"


def uuid_ids(kind: str) -> str:
    """Random UUID4 ids; the kind is ignored"""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def make_id_factory(strategy: str = "sequential") -> IdFactory:
    """Build an id factory from its config name"""
    if strategy == "sequential":
        return SequentialIds()
    if strategy == "uuid":
        return uuid_ids
    raise ValueError(f"Unknown id strategy: {strategy}")

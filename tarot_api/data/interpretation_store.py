# tarot_api/data/interpretation_store.py
import threading
from typing import Dict, Optional


class InterpretationStore:
    """
    Process-wide map of request ID -> interpretation text.

    Each request ID is written once by the background reading task and read by later
    lookups. Entries live for the lifetime of the process.
    """

    def __init__(self):
        self._interpretations: Dict[str, str] = {}
        self._lock = threading.Lock()

    def put(self, request_id: str, interpretation: str) -> None:
        with self._lock:
            self._interpretations[request_id] = interpretation

    def get(self, request_id: str) -> Optional[str]:
        with self._lock:
            return self._interpretations.get(request_id)

    def __contains__(self, request_id: str) -> bool:
        with self._lock:
            return request_id in self._interpretations

    def __len__(self) -> int:
        with self._lock:
            return len(self._interpretations)


interpretation_store = InterpretationStore()

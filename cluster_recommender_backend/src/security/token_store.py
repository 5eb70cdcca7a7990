"""Token validity store consulted after signature verification.

A token is only accepted while the store still knows its (subject, token id)
pair; removing the pair revokes the token.
"""
from __future__ import annotations

import threading
from typing import Protocol, Set, Tuple


class TokenStore(Protocol):
    def exists(self, subject: str, token_id: str) -> bool:
        ...


class InMemoryTokenStore:
    """Process-local store for a single credential role."""

    def __init__(self, role: str = ""):
        self.role = role
        self._tokens: Set[Tuple[str, str]] = set()
        self._lock = threading.Lock()

    def store(self, subject: str, token_id: str) -> None:
        with self._lock:
            self._tokens.add((subject, token_id))

    def revoke(self, subject: str, token_id: str) -> None:
        with self._lock:
            self._tokens.discard((subject, token_id))

    def exists(self, subject: str, token_id: str) -> bool:
        with self._lock:
            return (subject, token_id) in self._tokens

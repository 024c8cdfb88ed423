"""
JSON file backed store for the winners list.

This module provides ``WinnersStore``, the data-access layer of the
service.  A store is bound to one JSON file with the layout
``{"winners": [{"country": str, "year": int}, ...]}``.  The whole
list is read into memory by ``load`` and rewritten wholesale after
every successful ``add``.  Winners are never updated or deleted.

A single store instance is created by ``create_app`` and shared by
all requests, so every read-modify-write sequence runs under a lock.
"""

import json
import logging
import os
import threading
from typing import Iterator, List, Optional

from fastapi import Request
from pydantic import ValidationError

from world_cup_api.app.schemas.winner import Winner, Winners


logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for all winners store failures."""


class StoreIOError(StoreError, OSError):
    """The data file is missing, unreadable or could not be written."""


class StoreParseError(StoreError, ValueError):
    """The data file does not contain a valid winners document."""


class StoreValidationError(StoreError, ValueError):
    """A new winner violates the country or year constraints."""


class WinnersStore:
    """In-memory winners list persisted to a JSON file."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._winners: List[Winner] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._winners)

    def load(self, path: Optional[str] = None) -> None:
        """Read the data file and replace the in-memory list.

        Parameters
        ----------
        path : Optional[str]
            Switch the store to another file before loading.  Defaults
            to the path the store was created with.

        Raises
        ------
        StoreIOError
            If the file does not exist or cannot be read.
        StoreParseError
            If the content is not valid JSON or does not match the
            winners schema.  The previous list is kept in that case.
        """
        path = path or self.path
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as exc:
            raise StoreIOError(exc.errno, f"Cannot read winners file: {exc.strerror}", path) from exc
        try:
            document = Winners.model_validate_json(raw)
        except ValidationError as exc:
            raise StoreParseError(f"Malformed winners file {path}: {exc}") from exc
        with self._lock:
            self.path = path
            self._winners = list(document.winners)
        logger.info("Loaded %d winners from %s", len(document.winners), path)

    def list_all(self) -> List[Winner]:
        """Return a snapshot of every stored winner, oldest first."""
        with self._lock:
            return list(self._winners)

    def list_all_json(self) -> str:
        """Return the full list serialized as ``{"winners": [...]}``."""
        return Winners(winners=self.list_all()).model_dump_json()

    def list_by_year(self, year: int) -> Iterator[Winner]:
        """Lazily yield the winners of exactly ``year``.

        The snapshot is taken on the first ``next`` call; nothing is
        yielded when no winner matches.
        """
        for winner in self.list_all():
            if winner.year == year:
                yield winner

    def max_year(self) -> Optional[int]:
        with self._lock:
            return self._max_year()

    def add(self, winner: Winner) -> None:
        """Validate ``winner``, append it and persist the whole list.

        Only record-breaking entries are accepted: the year must be
        strictly greater than every stored year.

        Raises
        ------
        StoreValidationError
            If the country is empty or the year is not after the
            latest stored year.
        StoreIOError
            If the file could not be rewritten.  The in-memory list is
            left unchanged.
        """
        if not winner.country.strip():
            logger.warning("Rejected winner with empty country for %s", winner.year)
            raise StoreValidationError("country must not be empty")
        with self._lock:
            latest = self._max_year()
            if latest is not None and winner.year <= latest:
                logger.warning(
                    "Rejected winner %s %s: year must be after %s",
                    winner.country,
                    winner.year,
                    latest,
                )
                raise StoreValidationError(f"year must be greater than {latest}")
            updated = self._winners + [winner]
            self._save(updated)
            self._winners = updated
        logger.info("Added winner %s %s", winner.country, winner.year)

    def _max_year(self) -> Optional[int]:
        # Caller holds the lock.
        if not self._winners:
            return None
        return max(w.year for w in self._winners)

    def _save(self, winners: List[Winner]) -> None:
        """Rewrite the data file with ``winners`` through a temporary file."""
        document = Winners(winners=winners).model_dump()
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StoreIOError(exc.errno, f"Cannot write winners file: {exc.strerror}", self.path) from exc


def get_store(request: Request) -> WinnersStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store

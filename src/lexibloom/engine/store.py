"""Persistence for the hint budget."""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from pydantic import ValidationError

from .models import HintBudget


logger = logging.getLogger(__name__)

STORE_KEY = "lexibloom.hintBudget"


@runtime_checkable
class HintStateStore(Protocol):
    """Where the hint budget lives between sessions."""

    def load(self) -> Optional[HintBudget]:
        """Return the saved budget, or None when nothing usable is stored."""
        ...

    def save(self, budget: HintBudget) -> None:
        ...


class InMemoryHintStore:
    """Store that keeps the budget in memory, for tests and throwaway sessions."""

    def __init__(self, budget: Optional[HintBudget] = None):
        self.budget = budget.model_copy() if budget else None
        self.save_count = 0

    def load(self) -> Optional[HintBudget]:
        return self.budget.model_copy() if self.budget else None

    def save(self, budget: HintBudget) -> None:
        self.budget = budget.model_copy()
        self.save_count += 1


class JsonFileHintStore:
    """
    Store the budget in a JSON document under a fixed namespaced key.

    Other keys in the document are preserved on save, so several kinds of
    state can share one file.
    """

    def __init__(self, path: str | Path, key: str = STORE_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def _read_document(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read hint state from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring hint state in %s: top level is not an object", self.path)
            return {}
        return data

    def load(self) -> Optional[HintBudget]:
        record = self._read_document().get(self.key)
        if record is None:
            return None
        try:
            return HintBudget.model_validate(record)
        except ValidationError as e:
            logger.warning("Discarding malformed hint state under %r: %s", self.key, e)
            return None

    def save(self, budget: HintBudget) -> None:
        """Write the budget; failures are logged and the caller keeps its copy."""
        document = self._read_document()
        document[self.key] = budget.model_dump()

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w') as f:
                json.dump(document, f, indent=2)
        except OSError as e:
            logger.warning("Could not save hint state to %s: %s", self.path, e)

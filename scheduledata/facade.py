"""
Shared error-containment boundary for the per-entity views.

Every public view operation goes through ``BaseView._run``:

1. a rejected argument short-circuits to the default (store not touched)
2. the injected store is acquired; a missing store is a fault
3. the lookup runs and returns a Result
4. any fault (or unexpected exception) is logged once and turned into the
   operation's default value

Nothing raised inside a lookup ever reaches the caller.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from scheduledata.errors import ErrorKind, Fault, Result
from scheduledata.model import EntityId, Event
from scheduledata.store import EntityStore

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")

_LOG_LEVELS = {
    ErrorKind.INVALID_ARGUMENT: logging.WARNING,
    ErrorKind.NOT_FOUND: logging.WARNING,
    ErrorKind.STORE_UNAVAILABLE: logging.ERROR,
    ErrorKind.INTERNAL: logging.ERROR,
}


class BaseView:
    """
    Base class of all views. Holds the injected store and the boundary logic.
    """

    name = "View"

    def __init__(self, store: Optional[EntityStore]) -> None:
        self._store = store
        self.last_fault: Optional[Fault] = None

    def _run(
        self,
        operation: str,
        default: T,
        lookup: Callable[[EntityStore], Result[T]],
        identifier: Any = None,
        invalid: Optional[str] = None,
    ) -> T:
        if invalid:
            self._report(Fault(ErrorKind.INVALID_ARGUMENT, operation, identifier, invalid))
            return default

        if self._store is None:
            self._report(
                Fault(ErrorKind.STORE_UNAVAILABLE, operation, identifier, "entity store is not initialized")
            )
            return default

        try:
            result = lookup(self._store)
        except Exception as exc:
            self._report(Fault(ErrorKind.INTERNAL, operation, identifier, repr(exc)), exc_info=True)
            return default

        if result.fault is not None:
            self._report(result.fault)
            return default

        self.last_fault = None
        return result.value if result.value is not None else default

    def _report(self, fault: Fault, exc_info: bool = False) -> None:
        self.last_fault = fault
        logger.log(_LOG_LEVELS[fault.kind], "[%s] %s", self.name, fault, exc_info=exc_info)


# ---------------------------------------------------------------------------
# Shared lookup helpers
# ---------------------------------------------------------------------------


def found(value: T) -> Result[T]:
    return Result.success(value)


def not_found(operation: str, identifier: Any, what: str) -> Result[Any]:
    return Result.failure(Fault(ErrorKind.NOT_FOUND, operation, identifier, f"{what} not found"))


def count_references(events: Iterable[Event], refs: Callable[[Event], Iterable[Any]]) -> Counter:
    """
    One pass over the events, one increment per referenced entity id.
    """
    counts: Counter = Counter()
    for ev in events:
        for ref in refs(ev):
            counts[ref.id] += 1
    return counts


def with_event_counts(entities: Iterable[E], counts: Counter) -> List[E]:
    """
    Shallow copies of ``entities`` with ``event_count`` set. Stored objects are untouched.
    """
    return [replace(entity, event_count=counts.get(entity.id, 0)) for entity in entities]  # type: ignore[type-var]


def single(ref: Any) -> tuple:
    return (ref,) if ref is not None else ()


def is_rejected_id(value: Optional[EntityId]) -> bool:
    # Falsy ids (None, "", 0) are rejected by the relational queries
    return not value

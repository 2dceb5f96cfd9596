"""
Category view: lookups over audience categories plus event counts per category.
"""

from __future__ import annotations

from typing import List, Optional

from scheduledata.facade import BaseView, count_references, found, with_event_counts
from scheduledata.model import Category, EntityId


class CategoryView(BaseView):
    name = "CategoryView"

    def get_category(self, category_id: EntityId) -> Optional[Category]:
        return self._run(
            "get_category",
            None,
            lambda store: found(store.get_category(category_id)),
            identifier=category_id,
        )

    def get_all_categories(self) -> List[Category]:
        return self._run(
            "get_all_categories",
            [],
            lambda store: found(list(store.categories().values())),
        )

    def get_categories_with_event_counts(self) -> List[Category]:
        """
        Every category in store order, copied with ``event_count`` set to the
        number of events that list it. Categories nobody uses get 0.
        """

        def lookup(store):
            counts = count_references(store.all_events(), lambda ev: ev.categories)
            return found(with_event_counts(store.categories().values(), counts))

        return self._run("get_categories_with_event_counts", [], lookup)

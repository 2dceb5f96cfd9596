"""
Unit tests for CategoryView.

eventCount rule:
- a category's count = number of events whose categories contain it
- categories nobody uses get 0
- the stored categories are never modified
"""

import unittest

from payloads import conference_payload, scenario_payload

from scheduledata.category_view import CategoryView
from scheduledata.store import EntityStore


class TestCategoryView(unittest.TestCase):
    def setUp(self) -> None:
        self.store = EntityStore.from_payload(scenario_payload())
        self.view = CategoryView(self.store)

    def test_get_category(self) -> None:
        self.assertEqual(self.view.get_category(5).name, "Student")
        self.assertIsNone(self.view.get_category(404))

    def test_get_all_categories_in_store_order(self) -> None:
        self.assertEqual([c.id for c in self.view.get_all_categories()], [5, 6, 7])

    def test_every_listed_category_can_be_looked_up(self) -> None:
        for c in self.view.get_all_categories():
            self.assertEqual(self.view.get_category(c.id), c)

    def test_event_counts_scenario(self) -> None:
        counts = {c.id: c.event_count for c in self.view.get_categories_with_event_counts()}
        self.assertEqual(counts, {5: 2, 6: 1, 7: 0})

    def test_counts_match_a_direct_count(self) -> None:
        view = CategoryView(EntityStore.from_payload(conference_payload()))
        events = view._store.all_events()
        for c in view.get_categories_with_event_counts():
            expected = sum(1 for ev in events if any(ref.id == c.id for ref in ev.categories))
            self.assertEqual(c.event_count, expected)

    def test_counted_copies_leave_store_untouched(self) -> None:
        counted = self.view.get_categories_with_event_counts()
        self.assertEqual(counted[0].name, "Student")
        self.assertIsNot(counted[0], self.store.get_category(5))
        self.assertIsNone(self.store.get_category(5).event_count)

    def test_repeated_calls_are_equal(self) -> None:
        self.assertEqual(self.view.get_categories_with_event_counts(), self.view.get_categories_with_event_counts())
        self.assertEqual(self.view.get_all_categories(), self.view.get_all_categories())


if __name__ == "__main__":
    unittest.main()

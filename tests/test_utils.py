import logging
import random
import unittest

from observable_list import ObservableList
from observable_list.config import ErrorPolicy, ListConfig
from observable_list.exceptions import IndexOutOfBoundsError, SubscriberError
from observable_list.utils import apply_change, bind_mirror


class TestApplyChange(unittest.TestCase):

    def test_applies_splice(self):
        target = [1, 2, 3]
        apply_change(target, 1, (2, 3), (9,))
        self.assertEqual(target, [1, 9])

    def test_pure_insert_at_end(self):
        target = [1]
        apply_change(target, 1, (), ("a", "b"))
        self.assertEqual(target, [1, "a", "b"])

    def test_rejects_out_of_sync_target(self):
        target = [1]
        with self.assertRaises(ValueError):
            apply_change(target, 0, (1, 2), ())
        with self.assertRaises(ValueError):
            apply_change(target, 2, (), (3,))
        self.assertEqual(target, [1])


class TestBindMirror(unittest.TestCase):

    def test_mirror_is_seeded_and_follows(self):
        source = ObservableList(["a", "b"])
        mirror, subscription = bind_mirror(source)
        self.assertEqual(mirror, ["a", "b"])

        source.insert(1, "x")
        source.remove("a")
        source.add_all(["c", "d"])
        self.assertEqual(mirror, source.to_list())

        subscription()
        source.clear()
        self.assertEqual(mirror, ["x", "b", "c", "d"])

    def test_existing_target_is_overwritten(self):
        source = ObservableList([1])
        target = ["stale"]
        mirror, _ = bind_mirror(source, target)
        self.assertIs(mirror, target)
        self.assertEqual(target, [1])

    @staticmethod
    def _normalize(source):
        def on_change(index, removed, added):
            if added == ("raw",):
                source.set(index, "clean")
        return on_change

    def test_mirror_bound_before_reentrant_subscriber_stays_in_sync(self):
        source = ObservableList()
        mirror, _ = bind_mirror(source)
        source.changed.subscribe(self._normalize(source))

        source.add("raw")

        self.assertEqual(source.to_list(), ["clean"])
        self.assertEqual(mirror, ["clean"])

    def test_mirror_bound_after_reentrant_subscriber_falls_out_of_sync(self):
        """The nested change reaches the mirror first and cannot be applied."""
        source = ObservableList()
        source.changed.subscribe(self._normalize(source))
        mirror, _ = bind_mirror(source)

        with self.assertLogs("observable_list", level=logging.ERROR):
            source.add("raw")

        self.assertEqual(source.to_list(), ["clean"])
        self.assertEqual(mirror, ["raw"])

        # Binding again resyncs the mirror.
        mirror, _ = bind_mirror(source, mirror)
        self.assertEqual(mirror, ["clean"])

    def test_mirror_bound_after_reentrant_subscriber_raises_under_raise_policy(self):
        source = ObservableList(config=ListConfig(error_policy=ErrorPolicy.RAISE))
        source.changed.subscribe(self._normalize(source))
        mirror, _ = bind_mirror(source)

        with self.assertRaises(SubscriberError):
            source.add("raw")
        self.assertEqual(source.to_list(), ["clean"])
        self.assertEqual(mirror, ["raw"])


class TestReferenceModel(unittest.TestCase):
    """Random operation sequences checked against a plain Python list."""

    def setUp(self):
        self.rng = random.Random(1234)
        # RAISE so that failed assertions inside the subscriber fail the test.
        self.lst = ObservableList(config=ListConfig(error_policy=ErrorPolicy.RAISE))
        self.model = []
        self.notifications = []
        self.mirror, _ = bind_mirror(self.lst)
        self.lst.changed.subscribe(self._check_splice)
        self._before = []

    def _check_splice(self, index, removed, added):
        # The removed slice must match what was really there, and splicing
        # the pre-mutation content must give the post-mutation content.
        self.assertEqual(list(removed), self._before[index:index + len(removed)])
        expected = self._before[:index] + list(added) + self._before[index + len(removed):]
        self.assertEqual(expected, self.lst.to_list())
        self.notifications.append((index, removed, added))

    def _step(self):
        n = len(self.model)
        op = self.rng.choice(["add", "add_all", "insert", "insert_all", "remove",
                              "remove_last", "remove_at", "remove_range", "clear",
                              "set", "replace_range", "set_elements"])
        value = self.rng.randint(0, 5)
        values = [self.rng.randint(0, 5) for _ in range(self.rng.randint(0, 3))]
        index = self.rng.randint(-1, n + 1)
        count = self.rng.randint(-1, 3)
        self._before = self.model[:]
        emitted_before = len(self.notifications)
        changed = True

        try:
            if op == "add":
                self.lst.add(value)
                self.model.append(value)
            elif op == "add_all":
                self.lst.add_all(values)
                self.model.extend(values)
                changed = bool(values)
            elif op == "insert":
                self.lst.insert(index, value)
                self.model.insert(index, value)
            elif op == "insert_all":
                self.lst.insert_all(index, values)
                self.model[index:index] = values
                changed = bool(values)
            elif op == "remove":
                changed = self.lst.remove(value)
                self.assertEqual(changed, value in self.model)
                if changed:
                    self.model.remove(value)
            elif op == "remove_last":
                changed = self.lst.remove_last(value)
                self.assertEqual(changed, value in self.model)
                if changed:
                    del self.model[len(self.model) - 1 - self.model[::-1].index(value)]
            elif op == "remove_at":
                self.assertEqual(self.lst.remove_at(index), self.model.pop(index))
            elif op == "remove_range":
                removed = self.lst.remove_range(index, count)
                self.assertEqual(removed, self.model[index:index + count])
                del self.model[index:index + count]
                changed = count > 0
            elif op == "clear":
                self.assertEqual(self.lst.clear(), self.model)
                changed = bool(self.model)
                self.model = []
            elif op == "set":
                self.assertEqual(self.lst.set(index, value), self.model[index])
                self.model[index] = value
            elif op == "replace_range":
                removed = self.lst.replace_range(index, count, values)
                self.assertEqual(removed, self.model[index:index + count])
                self.model[index:index + count] = values
                changed = count > 0 or bool(values)
            elif op == "set_elements":
                self.assertEqual(self.lst.set_elements(values), self.model)
                changed = bool(self.model) or bool(values)
                self.model = list(values)
        except IndexOutOfBoundsError:
            changed = False
            # Only reachable with an index or count the model also considers invalid.
            self.assertTrue(index < 0 or count < 0 or index > n or
                            (op in ("remove_at", "set") and index >= n) or
                            (op in ("remove_range", "replace_range") and index + count > n))

        self.assertEqual(self.lst.to_list(), self.model)
        self.assertEqual(self.mirror, self.model)
        self.assertEqual(len(self.notifications) - emitted_before, 1 if changed else 0)

    def test_random_operations_match_plain_list(self):
        for _ in range(500):
            self._step()
        self.assertGreater(len(self.notifications), 100)


if __name__ == '__main__':
    unittest.main()

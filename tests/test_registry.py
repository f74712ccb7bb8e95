import unittest

from finalmark.state.registry import ComponentRegistry


class RegistryTests(unittest.TestCase):
    def test_add_assigns_increasing_ids_with_blank_fields(self):
        registry = ComponentRegistry()
        first = registry.add()
        second = registry.add()
        self.assertEqual((first, second), (0, 1))
        component = registry.get(second)
        self.assertEqual(component.name, "")
        self.assertEqual(component.weight, 0)
        self.assertIsNone(component.score)

    def test_ids_are_not_reused_after_remove_or_clear(self):
        registry = ComponentRegistry()
        registry.add()
        last = registry.add()
        registry.remove(last)
        self.assertEqual(registry.add(), 2)
        registry.clear()
        self.assertEqual(len(registry), 0)
        self.assertEqual(registry.add(), 3)

    def test_remove_unknown_id_is_noop(self):
        registry = ComponentRegistry()
        registry.add()
        registry.remove(42)
        self.assertEqual(len(registry), 1)

    def test_update_parses_raw_text(self):
        registry = ComponentRegistry()
        cid = registry.add()
        registry.update(cid, "name", "Midterm 1")
        registry.update(cid, "weight", "30")
        registry.update(cid, "score", "82.5")
        component = registry.get(cid)
        self.assertEqual(component.name, "Midterm 1")
        self.assertEqual(component.weight, 30.0)
        self.assertEqual(component.score, 82.5)

        registry.update(cid, "weight", "oops")
        registry.update(cid, "score", "")
        self.assertEqual(component.weight, 0.0)
        self.assertIsNone(component.score)

    def test_update_missing_component_returns_false(self):
        registry = ComponentRegistry()
        self.assertFalse(registry.update(7, "weight", "10"))

    def test_update_unknown_field_raises(self):
        registry = ComponentRegistry()
        cid = registry.add()
        with self.assertRaises(ValueError):
            registry.update(cid, "id", "3")

    def test_total_weight_includes_final(self):
        registry = ComponentRegistry()
        registry.update(registry.add(), "weight", "25")
        registry.update(registry.add(), "weight", "35")
        self.assertEqual(registry.total_weight(40), 100)
        self.assertEqual(registry.total_weight(0), 60)

    def test_snapshot_is_detached(self):
        registry = ComponentRegistry()
        cid = registry.add()
        snapshot = registry.snapshot()
        registry.update(cid, "weight", "50")
        self.assertEqual(snapshot[0].weight, 0)


if __name__ == "__main__":
    unittest.main()

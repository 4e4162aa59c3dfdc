import unittest

from picker.core import selectors
from picker.core.state import AppEntry, Storage

STORAGE = Storage(
    apps=(
        AppEntry("Safari", "KeyS", True, False),
        AppEntry("Firefox", "KeyF", False, True),
        AppEntry("Arc", None, True, False),
        AppEntry("Opera", "KeyO", False, False),
    )
)


class CoreSelectorsTests(unittest.TestCase):
    def test_index_of_and_find_app(self):
        self.assertEqual(selectors.index_of(STORAGE, "Arc"), 2)
        self.assertEqual(selectors.index_of(STORAGE, "Edge"), -1)
        self.assertEqual(selectors.find_app(STORAGE, "Arc"), AppEntry("Arc", None, True, False))
        self.assertIsNone(selectors.find_app(STORAGE, "Edge"))

    def test_installed_and_removed_apps(self):
        self.assertEqual([a.name for a in selectors.installed_apps(STORAGE)], ["Safari", "Arc"])
        self.assertEqual([a.name for a in selectors.removed_apps(STORAGE)], ["Firefox"])

    def test_hot_code_lookup_skips_hidden_apps(self):
        self.assertEqual(selectors.app_for_hot_code(STORAGE, "KeyS").name, "Safari")
        self.assertIsNone(selectors.app_for_hot_code(STORAGE, "KeyF"))
        self.assertIsNone(selectors.app_for_hot_code(STORAGE, "KeyO"))

    def test_hot_code_map(self):
        self.assertEqual(
            selectors.hot_code_map(STORAGE),
            {"KeyS": "Safari", "KeyF": "Firefox", "KeyO": "Opera"},
        )

    def test_check_invariants_reports_violations(self):
        self.assertEqual(selectors.check_invariants(STORAGE), [])

        broken = Storage(
            apps=(
                AppEntry("Safari", "KeyS", True, True),
                AppEntry("Safari", "KeyS", False, False),
            )
        )
        problems = selectors.check_invariants(broken)
        self.assertEqual(len(problems), 3)
        self.assertTrue(any("stored 2 times" in p for p in problems))
        self.assertTrue(any("'KeyS' bound to 2 apps" in p for p in problems))
        self.assertTrue(any("both installed and removed" in p for p in problems))


if __name__ == "__main__":
    unittest.main()

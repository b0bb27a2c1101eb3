# tests/test_save_manager.py
import json
import os
import unittest

from tests.fixtures import GardenTestBase
from homestead.config import SAVE_FORMAT_VERSION
from homestead.world.save_manager import SaveManager, compare_versions


class TestSaveManagerStore(GardenTestBase):

    def setUp(self):
        super().setUp()
        self.saves = SaveManager(self.save_dir)

    def test_initialize_only_sets_missing_keys(self):
        self.assertTrue(self.saves.initialize("weather", {"rain": False}))
        self.assertFalse(self.saves.initialize("weather", {"rain": True}))
        self.assertEqual(self.saves.get("weather"), {"rain": False})

    def test_get_set_has(self):
        self.assertFalse(self.saves.has("quests"))
        self.assertEqual(self.saves.get("quests", []), [])
        self.assertTrue(self.saves.set("quests", ["find_seeds"]))
        self.assertTrue(self.saves.has("quests"))
        self.assertEqual(self.saves.get("quests"), ["find_seeds"])
        self.assertFalse(self.saves.set("", 1))

    def test_slot_file_layout(self):
        self.saves.set("weather", {"rain": True})
        self.assertTrue(self.saves.save("slot1"))

        path = os.path.join(self.save_dir, "slot1.json")
        with open(path, 'r') as f:
            data = json.load(f)
        self.assertEqual(data["save_format_version"], SAVE_FORMAT_VERSION)
        self.assertIn("timestamp", data)
        self.assertEqual(data["plugins"]["weather"], {"version": SAVE_FORMAT_VERSION, "data": {"rain": True}})

    def test_participants_are_collected_and_restored(self):
        state = {"count": 3}
        restored = []
        self.saves.register_participant("counter", lambda: dict(state), restored.append)

        self.saves.save("slot1")
        state["count"] = 99
        self.assertTrue(self.saves.load("slot1"))
        self.assertEqual(restored, [{"count": 3}])

    def test_missing_file_starts_fresh(self):
        restored = []
        self.saves.register_participant("counter", lambda: 1, restored.append)
        self.saves.set("leftover", True)

        self.assertTrue(self.saves.load("never_saved"))
        self.assertEqual(restored, [None])
        self.assertFalse(self.saves.has("leftover"))

    def test_corrupt_file_leaves_state_alone(self):
        os.makedirs(self.save_dir, exist_ok=True)
        with open(os.path.join(self.save_dir, "broken.json"), 'w') as f:
            f.write("{ definitely not json")
        restored = []
        self.saves.register_participant("counter", lambda: 1, restored.append)
        self.saves.set("counter", 7)

        self.assertFalse(self.saves.load("broken"))
        self.assertEqual(restored, [])
        self.assertEqual(self.saves.get("counter"), 7)

    def test_file_without_plugin_data_is_rejected(self):
        os.makedirs(self.save_dir, exist_ok=True)
        with open(os.path.join(self.save_dir, "odd.json"), 'w') as f:
            json.dump([1, 2, 3], f)
        restored = []
        self.saves.register_participant("counter", lambda: 1, restored.append)

        self.assertFalse(self.saves.load("odd"))
        self.assertEqual(restored, [])

    def test_version_mismatch_keeps_data(self):
        os.makedirs(self.save_dir, exist_ok=True)
        with open(os.path.join(self.save_dir, "old.json"), 'w') as f:
            json.dump({"plugins": {
                "weather": {"version": "0.9.0", "data": {"rain": True}},
                "junk": "not an entry"
            }}, f)

        self.assertTrue(self.saves.load("old"))
        self.assertEqual(self.saves.get("weather"), {"rain": True})
        self.assertFalse(self.saves.has("junk"))

    def test_file_names_are_sanitised(self):
        self.assertTrue(self.saves.save("../../etc/evil name"))
        files = os.listdir(self.save_dir)
        self.assertEqual(files, ["etcevilname.json"])
        self.assertFalse(self.saves.save("///"))

    def test_delete_and_unregister(self):
        calls = []
        self.saves.register_participant("counter", lambda: 1, calls.append)
        self.saves.unregister_participant("counter")
        self.saves.save("temp")
        self.assertFalse(self.saves.has("counter"))

        self.assertTrue(self.saves.exists("temp"))
        self.assertTrue(self.saves.delete("temp"))
        self.assertFalse(self.saves.exists("temp"))
        self.assertFalse(self.saves.delete("temp"))

    def test_compare_versions(self):
        self.assertEqual(compare_versions("1.0.0", "1.0.0"), 0)
        self.assertEqual(compare_versions("1.2", "1.10"), -1)
        self.assertEqual(compare_versions("2.0.0", "1.9.9"), 1)


class TestGameSaveLoad(GardenTestBase):

    def test_session_round_trip(self):
        self.set_date(day=3, season=1, hour=9)
        plant_id = self.registry.spawn("carrot", "farm")
        self.engine.water(self.registry.get(plant_id))
        saved_minutes = self.clock.total_minutes
        self.assertTrue(self.game.save_game("farm_run"))

        self.game.new_game()
        self.assertEqual(self.clock.total_minutes, 0)
        self.assertEqual(len(self.registry), 0)

        self.assertTrue(self.game.load_game("farm_run"))
        self.assertEqual(self.clock.total_minutes, saved_minutes)
        self.assertEqual(self.game.selected_plant_id, plant_id)
        plant = self.registry.get(plant_id)
        self.assertEqual((plant.planted_at.day, plant.planted_at.season), (3, 1))
        self.assertEqual(plant.water_level, 80)

    def test_time_away_is_not_credited(self):
        self.game.save_game("slot")
        self.wall.advance(6 * 3600 * 1000)
        self.game.load_game("slot")
        self.assertEqual(self.tick_seconds(1), 1)
        self.assertEqual(self.clock.total_minutes, 1)

    def test_explicit_pause_is_saved(self):
        self.clock.pause()
        self.game.save_game("paused")
        self.game.new_game()
        self.assertFalse(self.clock.is_paused)
        self.game.load_game("paused")
        self.assertTrue(self.clock.is_paused)


if __name__ == '__main__':
    unittest.main()

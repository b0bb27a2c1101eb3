# tests/test_commands.py
import os
import unittest

from tests.fixtures import GardenTestBase
from homestead.commands.command_system import command, get_command_groups, get_registered_commands, unregister_command


class TestCommandParsing(GardenTestBase):

    def test_unknown_command(self):
        result = self.game.process_command("dance wildly")
        self.assertIn("Unknown command: dance", result)

    def test_case_insensitivity_and_aliases(self):
        result = self.game.process_command("PLANT Carrot")
        self.assertIn("You plant some Carrot", result)
        self.assertIsNotNone(self.game.selected_plant_id)

        result = self.game.process_command("Sow turnip")
        self.assertIn("Turnip", result)
        self.assertEqual(len(self.registry), 2)

    def test_output_goes_to_message_buffer(self):
        self.game.process_command("time")
        self.assertMessageContains("> time")
        self.assertMessageContains("Year 1")

    def test_help(self):
        self.assertIn("Garden", self.game.process_command("help"))
        self.assertIn("Command: WATER", self.game.process_command("help water"))
        self.assertIn("Help: Time Commands", self.game.process_command("help time"))
        self.assertIn("No help found", self.game.process_command("help juggling"))

    def test_suggestions(self):
        suggestions = self.game.command_processor.get_command_suggestions("re")
        self.assertIn("resume", suggestions)
        self.assertIn("region", suggestions)

    def test_register_and_unregister(self):
        @command("whistle", ["tweet"], "other", "Whistle a tune.")
        def whistle_handler(args, context):
            return "You whistle."

        self.assertEqual(self.game.process_command("tweet"), "You whistle.")
        self.assertIn("whistle", [c["name"] for c in get_command_groups()["other"]])

        self.assertTrue(unregister_command("tweet"))
        self.assertNotIn("whistle", get_registered_commands())
        self.assertNotIn("tweet", get_registered_commands())
        self.assertIn("Unknown command", self.game.process_command("whistle"))
        self.assertFalse(unregister_command("whistle"))


class TestTimeCommands(GardenTestBase):

    def test_pause_and_resume(self):
        self.assertIn("Time paused", self.game.process_command("pause"))
        self.assertTrue(self.clock.is_paused)
        self.assertIn("already paused", self.game.process_command("pause"))

        self.assertIn("Time resumed", self.game.process_command("resume"))
        self.assertFalse(self.clock.is_paused)
        self.assertIn("not paused", self.game.process_command("resume"))

    def test_resume_inside_menu(self):
        self.game.process_command("pause")
        self.game.open_menu()
        result = self.game.process_command("resume")
        self.assertIn("once you leave the menu", result)
        self.assertTrue(self.clock.is_paused)

    def test_sleep(self):
        self.set_date(day=1, hour=21)
        result = self.game.process_command("sleep")
        self.assertIn("You sleep for 9h 00m", result)
        now = self.clock.get_current_time()
        self.assertEqual((now.day, now.hour), (2, 6))
        self.assertMessageContains("A new day begins")

    def test_time_reports_day_limit(self):
        self.set_date(day=1, hour=23)
        self.assertIn("Time will not pass until you sleep", self.game.process_command("time"))

    def test_missing_clock(self):
        self.game.clock = None
        self.assertIn("Time system not ready.", self.game.process_command("time"))
        self.assertIn("Time system not ready.", self.game.process_command("sleep"))
        self.assertIn("Time system not ready.", self.game.process_command("pause"))


class TestGardenCommands(GardenTestBase):

    def test_plant_requires_species(self):
        result = self.game.process_command("plant")
        self.assertIn("Plant what?", result)
        self.assertIn("carrot", result)

    def test_plant_unknown_species(self):
        self.assertIn("Unknown plant type 'tomato'.", self.game.process_command("plant tomato"))
        self.assertEqual(len(self.registry), 0)

    def test_plant_out_of_season_warns(self):
        self.assertIn("out of season", self.game.process_command("plant winter_kale"))

    def test_care_without_plant(self):
        for verb in ["water", "fertilize", "harvest", "status"]:
            self.assertIn("No plant found at this location.", self.game.process_command(verb))

    def test_water_twice(self):
        self.game.process_command("plant carrot")
        self.assertIn("Water level: 80/100", self.game.process_command("water"))
        self.assertIn("already been watered today", self.game.process_command("water"))

    def test_fertilize_twice(self):
        self.game.process_command("plant carrot")
        self.assertIn("Expected yield: 4", self.game.process_command("fertilize"))
        self.assertIn("already been fertilized", self.game.process_command("fertilize"))

    def test_explicit_plant_id(self):
        self.game.process_command("plant carrot")
        first_id = self.game.selected_plant_id
        self.game.process_command("plant turnip")
        self.game.process_command(f"water {first_id}")
        self.assertTrue(self.registry.get(first_id).watered_today)
        self.assertFalse(self.registry.get(self.game.selected_plant_id).watered_today)

    def test_status(self):
        self.game.process_command("plant carrot")
        result = self.game.process_command("status")
        self.assertIn("Carrot", result)
        self.assertIn("Stage: 1/3", result)
        self.assertIn("Water: 50/100", result)
        self.assertIn("Spring, Summer, Fall", result)
        self.assertIn("Not ready to harvest.", result)

    def test_harvest_flow(self):
        self.game.process_command("plant carrot")
        self.assertIn("not ready to harvest yet", self.game.process_command("harvest"))

        self.game.process_command("sleep")
        self.game.process_command("sleep")
        self.assertMessageContains("is ready to harvest")
        self.assertIn("Ready to harvest!", self.game.process_command("status"))

        result = self.game.process_command("harvest")
        self.assertIn("You harvest 2 Carrot", result)
        self.assertIsNone(self.game.selected_plant_id)
        self.assertEqual(len(self.registry), 0)

    def test_recurring_harvest_message(self):
        self.game.process_command("plant berry")
        self.game.process_command("sleep")
        self.game.process_command("sleep")
        result = self.game.process_command("harvest")
        self.assertIn("It will produce again in 3 days.", result)
        self.assertEqual(len(self.registry), 1)

    def test_plants_listing(self):
        self.assertIn("Nothing is growing here.", self.game.process_command("plants"))
        self.game.process_command("plant carrot")
        self.game.process_command("plant turnip")
        result = self.game.process_command("plants")
        self.assertIn("Carrot, stage 1/3", result)
        self.assertIn("Turnip, stage 1/3", result)

    def test_plants_in_other_regions_are_out_of_reach(self):
        self.game.process_command("plant carrot")
        plant_id = self.game.selected_plant_id
        self.assertIn("You travel to", self.game.process_command("region forest"))
        self.assertIn("No plant found at this location.", self.game.process_command(f"water {plant_id}"))
        self.game.process_command("region farm")
        self.assertEqual(self.game.selected_plant_id, plant_id)


class TestSystemCommands(GardenTestBase):

    def test_save_and_load(self):
        self.game.process_command("plant carrot")
        self.assertIn("Game saved", self.game.process_command("save slot2"))
        self.assertTrue(os.path.exists(os.path.join(self.save_dir, "slot2.json")))

        self.game.new_game()
        self.assertIn("Game loaded", self.game.process_command("load slot2"))
        self.assertEqual(len(self.registry), 1)

    def test_load_missing_slot(self):
        self.assertIn("not found", self.game.process_command("load ghost"))

    def test_failed_load_keeps_session(self):
        self.game.process_command("plant carrot")
        self.set_date(day=5)
        minutes_before = self.clock.total_minutes
        os.makedirs(self.save_dir, exist_ok=True)
        with open(os.path.join(self.save_dir, "broken.json"), 'w') as f:
            f.write("{ not json")

        self.assertIn("Error loading game", self.game.process_command("load broken"))
        self.assertEqual(self.clock.total_minutes, minutes_before)
        self.assertEqual(len(self.registry), 1)
        self.assertEqual(self.game.current_save_file, "test_save.json")


if __name__ == '__main__':
    unittest.main()

# tests/test_pause_controller.py
import unittest

from homestead.core.pause_controller import PauseController
from homestead.utils.logger import Logger, LogLevel


class TestPauseController(unittest.TestCase):

    def setUp(self):
        Logger.set_level(LogLevel.CRITICAL)
        self.controller = PauseController()
        self.transitions = []
        self.controller.add_listener(lambda paused, now_ms: self.transitions.append((paused, now_ms)))

    def test_explicit_pause(self):
        self.assertFalse(self.controller.is_paused())
        self.controller.set_explicit(True, 100)
        self.assertTrue(self.controller.is_paused())
        self.assertFalse(self.controller.contextual_pause)
        self.controller.set_explicit(False, 200)
        self.assertFalse(self.controller.is_paused())
        self.assertEqual(self.transitions, [(True, 100), (False, 200)])

    def test_contexts_are_counted(self):
        self.controller.push_context("menu", 0)
        self.controller.push_context("menu", 10)
        self.controller.pop_context("menu", 20)
        self.assertTrue(self.controller.is_paused())
        self.assertEqual(self.controller.active_contexts(), ["menu"])

        self.controller.pop_context("menu", 30)
        self.assertFalse(self.controller.is_paused())
        self.assertEqual(self.controller.active_contexts(), [])

    def test_listeners_only_hear_transitions(self):
        self.controller.push_context("menu", 0)
        self.controller.push_context("battle", 5)
        self.controller.set_explicit(True, 6)
        self.controller.pop_context("menu", 7)
        self.controller.set_explicit(False, 8)
        self.controller.pop_context("battle", 9)
        self.assertEqual(self.transitions, [(True, 0), (False, 9)])

    def test_popping_unknown_context_is_a_no_op(self):
        self.assertFalse(self.controller.pop_context("cutscene", 0))
        self.assertFalse(self.controller.is_paused())
        self.assertEqual(self.transitions, [])

    def test_total_paused_time(self):
        self.controller.push_context("menu", 1000)
        self.controller.pop_context("menu", 4000)
        self.controller.set_explicit(True, 5000)
        self.controller.set_explicit(False, 5500)
        self.assertEqual(self.controller.total_paused_ms, 3500)

    def test_clear_contexts(self):
        self.controller.push_context("menu", 0)
        self.controller.push_context("battle", 0)
        self.controller.clear_contexts(50)
        self.assertFalse(self.controller.is_paused())
        self.assertEqual(self.transitions[-1], (False, 50))

    def test_reset_is_silent(self):
        self.controller.set_explicit(True, 0)
        self.controller.push_context("menu", 0)
        self.transitions.clear()
        self.controller.reset()
        self.assertFalse(self.controller.is_paused())
        self.assertEqual(self.controller.total_paused_ms, 0.0)
        self.assertEqual(self.transitions, [])

    def test_remove_listener(self):
        self.controller._listeners.clear()
        heard = []
        listener = lambda paused, now_ms: heard.append(paused)
        self.controller.add_listener(listener)
        self.controller.add_listener(listener)
        self.controller.set_explicit(True)
        self.controller.remove_listener(listener)
        self.controller.set_explicit(False)
        self.assertEqual(heard, [True])


if __name__ == '__main__':
    unittest.main()

import unittest

from mock import MagicMock

from cncserver.bot_profile import BotProfile
from cncserver.errors import InvalidInputError
from cncserver.pacer import CommandPacer
from cncserver.pen_handling import HeightController
from cncserver.pen_state import PenState, Preset, Fraction, UP

import cnc_fixtures

# python -m unittest discover -s test in top-level package dir

class PenStateTestCase(unittest.TestCase):

    def test_defaults(self):
        pen = PenState()
        self.assertEqual(pen.position, (0, 0))
        self.assertEqual(pen.state, UP)
        self.assertEqual(pen.height, 0)
        self.assertEqual(pen.tool, 'color0')
        self.assertFalse(pen.engaged)
        self.assertFalse(pen.simulation)

    def test_engaged(self):
        self.assertTrue(Preset('paint').engaged)
        self.assertFalse(Preset('up').engaged)
        self.assertTrue(Fraction(0.2).engaged)
        self.assertFalse(Fraction(0).engaged)

    def test_preset_and_fraction_never_equal(self):
        self.assertNotEqual(Preset('1'), Fraction(1))
        self.assertEqual(Fraction(1), Fraction(1.0))

    def test_distance_counts_only_while_engaged(self):
        pen = PenState()
        pen.add_distance(100)
        self.assertEqual(pen.distance_counter, 0)
        pen.state = Preset('draw')
        pen.add_distance(100)
        pen.add_distance(25.5)
        self.assertEqual(pen.distance_counter, 125.5)
        pen.reset_counter()
        self.assertEqual(pen.distance_counter, 0)

    def test_snapshot_is_a_copy(self):
        pen = PenState()
        pen.state = Fraction(0.5)
        snap = pen.snapshot()
        self.assertEqual(snap['state'], 0.5)
        pen.x = 10
        self.assertEqual(snap['x'], 0)


class HeightControllerTestCase(unittest.TestCase):

    def setUp(self):
        self.bot = BotProfile(cnc_fixtures.bot_params())
        self.pen = PenState()
        self.link = cnc_fixtures.RecordingTransport()
        self.sleep = MagicMock()
        self.heights = HeightController(self.bot, self.pen,
            CommandPacer(self.link, 50, self.sleep))

    def test_first_height_uses_full_duration(self):
        self.assertEqual(self.heights.set_height('up'), UP)
        self.assertEqual(self.link.commands, ['SC,5,1200', 'SP,0', 'SM,500,0,0'])
        self.assertEqual(self.pen.height, 1200)
        self.sleep.assert_called_once()
        self.assertAlmostEqual(self.sleep.call_args[0][0], 0.45)

    def test_following_height_is_pro_rated(self):
        self.heights.set_height('up')
        self.assertEqual(self.heights.set_height('paint'), Preset('paint'))
        self.assertEqual(self.link.commands[3:], ['SC,5,1900', 'SP,0', 'SM,351,0,0'])
        self.assertEqual(self.pen.state, Preset('paint'))
        self.assertTrue(self.pen.engaged)

    def test_fraction(self):
        self.assertEqual(self.heights.set_height(0.5), Fraction(0.5))
        self.assertEqual(self.link.commands[0], 'SC,5,1550')
        self.assertEqual(self.pen.height, 1550)

    def test_zero_fraction_is_not_engaged(self):
        self.heights.set_height(0)
        self.assertEqual(self.pen.state, Fraction(0))
        self.assertFalse(self.pen.engaged)

    def test_unknown_preset_raises_pen(self):
        self.pen.state = Preset('paint')
        self.assertEqual(self.heights.set_height('sparkle'), UP)
        self.assertEqual(self.link.commands[0], 'SC,5,1200')

    def test_invalid_input(self):
        with self.assertRaises(InvalidInputError):
            self.heights.set_height(float('nan'))
        self.assertEqual(self.link.commands, [])

    def test_refused_command_leaves_height(self):
        self.link.fail_prefixes = ('SP',)
        self.assertIsNone(self.heights.set_height('paint'))
        self.assertEqual(self.link.commands, ['SC,5,1900', 'SP,0'])
        self.assertEqual(self.pen.height, 0)
        self.assertEqual(self.pen.state, UP)

    def test_raise_pen(self):
        self.pen.state = Preset('wash')
        self.assertEqual(self.heights.raise_pen(), UP)
        self.assertFalse(self.pen.engaged)


if __name__ == '__main__':
    unittest.main()

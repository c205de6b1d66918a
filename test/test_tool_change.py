import unittest

from mock import MagicMock

from cncserver import tool_change
from cncserver.bot_profile import BotProfile
from cncserver.errors import ToolNotFoundError
from cncserver.motion import MotionPlanner
from cncserver.pacer import CommandPacer
from cncserver.pen_handling import HeightController
from cncserver.pen_state import PenState, UP

import cnc_fixtures

# python -m unittest discover -s test in top-level package dir

class WigglePointsTestCase(unittest.TestCase):

    def test_single_axis_alternates(self):
        points = list(tool_change.wiggle_points((100, 100), 'y', 10, 2))
        self.assertEqual(points, [(100, 110), (100, 90), (100, 100)])

    def test_x_axis(self):
        points = list(tool_change.wiggle_points((0, 5), 'x', 3, 3))
        self.assertEqual(points, [(3, 5), (-3, 5), (3, 5), (0, 5)])

    def test_xy_diamond(self):
        points = list(tool_change.wiggle_points((100, 100), 'xy', 20, 4))
        self.assertEqual(points, [(120, 100), (100, 110), (80, 100), (100, 90), (100, 100)])

    def test_xy_repeats(self):
        points = list(tool_change.wiggle_points((0, 0), 'xy', 2, 6))
        self.assertEqual(points[4:], [(2, 0), (0, 1), (0, 0)])

    def test_no_iterations(self):
        self.assertEqual(list(tool_change.wiggle_points((7, 8), 'xy', 20, 0)), [(7, 8)])

    def test_down_height(self):
        self.assertEqual(tool_change.down_height_for('water2'), 'wash')
        self.assertEqual(tool_change.down_height_for('color5'), 'paint')


class ToolChangeSequencerTestCase(unittest.TestCase):

    def setUp(self):
        self.bot = BotProfile(cnc_fixtures.bot_params())
        self.pen = PenState()
        self.link = cnc_fixtures.RecordingTransport()
        pacer = CommandPacer(self.link, 50, MagicMock())
        heights = HeightController(self.bot, self.pen, pacer)
        self.sequencer = tool_change.ToolChangeSequencer(self.bot, self.pen,
            MotionPlanner(self.bot, self.pen, pacer), heights)

    def test_water_tool_change(self):
        self.assertTrue(self.sequencer.set_tool('water0'))
        self.assertEqual(self.link.commands, [
            'SC,5,1200', 'SP,0', 'SM,500,0,0',   # raise
            'SM,177,50,50',                      # travel
            'SC,5,1800', 'SP,0', 'SM,301,0,0',   # wash height
            'SM,50,0,10', 'SM,100,0,-20', 'SM,50,0,10', # wiggle
            'SC,5,1200', 'SP,0', 'SM,301,0,0',   # raise
        ])
        self.assertEqual(self.pen.tool, 'water0')
        self.assertEqual(self.pen.state, UP)
        self.assertEqual(self.pen.position, (50, 50))
        self.assertIs(self.sequencer.phase, tool_change.ToolPhase.IDLE)

    def test_paint_tool_uses_paint_height(self):
        self.assertTrue(self.sequencer.set_tool('color0'))
        self.assertIn('SC,5,1900', self.link.commands)
        self.assertNotIn('SC,5,1800', self.link.commands)
        self.assertEqual(self.pen.position, (100, 100))

    def test_unknown_tool(self):
        with self.assertRaises(ToolNotFoundError) as context:
            self.sequencer.set_tool('glitter')
        self.assertEqual(str(context.exception), 'Tool not found: glitter')
        self.assertEqual(self.link.commands, [])
        self.assertEqual(self.pen.tool, 'color0')

    def test_failed_step_stops_in_place(self):
        self.link.fail_prefixes = ('SC,5,1800',)
        self.assertFalse(self.sequencer.set_tool('water0'))
        self.assertEqual(self.link.commands[-1], 'SC,5,1800')
        self.assertEqual(len(self.link.commands), 5)
        self.assertEqual(self.pen.position, (50, 50))
        self.assertEqual(self.pen.tool, 'color0')
        self.assertIs(self.sequencer.phase, tool_change.ToolPhase.IDLE)


if __name__ == '__main__':
    unittest.main()

import unittest

from mock import MagicMock

from cncserver import motion
from cncserver.bot_profile import BotProfile
from cncserver.pacer import CommandPacer
from cncserver.pen_state import PenState, Preset

import cnc_fixtures

# python -m unittest discover -s test in top-level package dir

class MotionPlannerTestCase(unittest.TestCase):

    def make_planner(self, **overrides):
        self.bot = BotProfile(cnc_fixtures.bot_params(**overrides))
        self.pen = PenState()
        self.link = cnc_fixtures.RecordingLink()
        self.sleep = MagicMock()
        self.planner = motion.MotionPlanner(self.bot, self.pen,
            CommandPacer(self.link, 50, self.sleep))

    def setUp(self):
        self.make_planner()

    def test_move_duration(self):
        self.assertEqual(motion.move_duration(400, 400), 1000)
        self.assertEqual(motion.move_duration(0.1, 400), 1)

    def test_raised_move_uses_moving_speed(self):
        distance = self.planner.move_to((300, 400))
        self.assertEqual(distance, 500)
        self.assertEqual(self.link.commands, ['SM,1250,300,400'])
        self.assertEqual(self.pen.last_duration, 1250)
        self.assertEqual(self.pen.position, (300, 400))
        self.assertAlmostEqual(self.sleep.call_args[0][0], 1.2)

    def test_engaged_move_uses_drawing_speed(self):
        self.pen.state = Preset('paint')
        distance = self.planner.move_to((500, 400))
        self.assertAlmostEqual(distance, 640.312, places=3)
        self.assertEqual(self.link.commands, ['SM,3202,500,400'])
        self.assertAlmostEqual(self.sleep.call_args[0][0], 3.152)

    def test_relative_steps(self):
        self.pen.x, self.pen.y = 100, 100
        self.planner.move_to((40, 180))
        self.assertEqual(self.link.commands[-1].split(',')[2:], ['-60', '80'])

    def test_no_move_sends_nothing(self):
        self.pen.x, self.pen.y = 250, 250
        self.assertEqual(self.planner.move_to((250.2, 249.9)), 0)
        self.assertEqual(self.link.commands, [])

    def test_clamped_to_machine_area(self):
        self.planner.move_to((5000, -10))
        self.assertEqual(self.pen.position, (1000, 0))
        self.assertEqual(self.link.commands[-1].split(',')[2:], ['1000', '0'])

    def test_invalid_point(self):
        self.assertIsNone(self.planner.move_to((float('nan'), 10)))
        self.assertIsNone(self.planner.move_to((10, None)))
        self.assertEqual(self.link.commands, [])
        self.assertEqual(self.pen.position, (0, 0))

    def test_immediate(self):
        self.planner.move_to((300, 400), immediate=True)
        self.sleep.assert_not_called()

    def test_refused_move(self):
        self.link.result = False
        self.assertIsNone(self.planner.move_to((300, 400)))

    def test_invert_and_swap(self):
        self.make_planner(invert_axis_x=True, swap_motors=True)
        self.planner.move_to((100, 50))
        self.assertEqual(self.link.commands, ['SM,280,50,-100'])
        self.assertEqual(self.pen.position, (100, 50))

    def test_invert_y(self):
        self.make_planner(invert_axis_y=True)
        self.planner.move_to((30, 40))
        self.assertEqual(self.link.commands[-1].split(',')[2:], ['30', '-40'])


if __name__ == '__main__':
    unittest.main()

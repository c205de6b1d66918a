#
# Copyright 2023 Windell H. Oskay, Evil Mad Scientist Laboratories
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA  02111-1307  USA

'''
tool_change.py

Tool changes: raise, travel to the tool, dip, wiggle the brush, raise.

The classes and functions defined by this module are:

* wiggle_points: Generator of positions that agitate the brush in place

* ToolPhase: Steps of a tool change, in order

* ToolChangeSequencer: Runs a tool change, step by step

'''
from enum import Enum
import logging

from cncserver.errors import ToolNotFoundError

logger = logging.getLogger(__name__)


def down_height_for(tool_name):
    ''' Water dishes use the "wash" preset; everything else "paint" '''
    return 'wash' if 'water' in tool_name else 'paint'


def wiggle_points(start, axis, travel, iterations):
    '''
    Yield iterations + 1 positions around start, ending exactly at start.

    For a single axis ("x" or "y"), alternate +travel and -travel on that axis.
    For "xy", trace a diamond: right by travel, down by travel/2, left by
    travel, up by travel/2, and repeat.
    '''
    start_x, start_y = start
    toggle = True
    for i in range(iterations):
        x_pos, y_pos = start_x, start_y
        if axis == 'xy':
            rot = i % 4
            sign = 1 if rot < 2 else -1
            if rot % 2: # Odd: half travel, vertical
                y_pos += sign * travel / 2
            else:
                x_pos += sign * travel
        else:
            offset = travel if toggle else -travel
            if axis == 'x':
                x_pos += offset
            else:
                y_pos += offset
        yield (x_pos, y_pos)
        toggle = not toggle
    yield (start_x, start_y)


class ToolPhase(Enum):
    ''' Steps of a tool change '''
    IDLE = 0
    RAISED_FOR_TRAVEL = 1
    AT_TOOL_POSITION = 2
    ENGAGED = 3
    OSCILLATING = 4
    RAISED_FINAL = 5


class ToolChangeSequencer:
    '''
    ToolChangeSequencer: Strictly sequential tool change. A failed step stops
    the change where it is; nothing is rolled back.
    '''

    def __init__(self, bot, pen, motion, heights):
        self.bot = bot
        self.pen = pen
        self.motion = motion
        self.heights = heights
        self.phase = ToolPhase.IDLE

    def wiggle(self, axis, travel, iterations):
        ''' Wiggle around the current position. Return True if every move succeeded. '''
        for point in wiggle_points(self.pen.position, axis, travel, iterations):
            if self.motion.move_to(point) is None:
                return False
        return True

    def set_tool(self, tool_name):
        '''
        Change to tool_name. Raise ToolNotFoundError if the bot has no such tool.
        Return True when the change is complete, False if a step failed.
        '''
        tool = self.bot.tool(tool_name)
        if tool is None:
            raise ToolNotFoundError(tool_name)

        logger.info('Changing to tool: %s', tool_name)
        down_height = down_height_for(tool_name)

        steps = [
            (ToolPhase.RAISED_FOR_TRAVEL, self.heights.raise_pen),
            (ToolPhase.AT_TOOL_POSITION, lambda: self.motion.move_to(tool.position)),
            (ToolPhase.ENGAGED, lambda: self.heights.set_height(down_height)),
            (ToolPhase.OSCILLATING, lambda: self.wiggle(
                tool.wiggle_axis, tool.wiggle_travel, tool.wiggle_iterations) or None),
            (ToolPhase.RAISED_FINAL, self.heights.raise_pen),
        ]
        for phase, step in steps:
            self.phase = phase
            if step() is None:
                logger.error('Tool change to %s stopped at step %s', tool_name, phase.name)
                self.phase = ToolPhase.IDLE
                return False

        self.pen.tool = tool_name
        self.phase = ToolPhase.IDLE
        return True

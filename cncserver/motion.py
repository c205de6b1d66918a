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

"""
motion.py

Plan and issue straight constant-speed moves to absolute positions.

"""

import logging

from plotink import plot_utils # https://github.com/evil-mad/plotink

from cncserver import mapping

logger = logging.getLogger(__name__)


def move_duration(distance, speed):
    ''' Duration, ms, of a move at speed (units per second); never zero '''
    duration = abs(int(round(distance / speed * 1000)))
    return max(duration, 1)


def orient_steps(bot, delta_x, delta_y):
    ''' Apply axis inversion, then motor swap, to a step delta '''
    if bot.invert_x:
        delta_x = -delta_x
    if bot.invert_y:
        delta_y = -delta_y
    if bot.swap_motors:
        delta_x, delta_y = delta_y, delta_x
    return delta_x, delta_y


class MotionPlanner:
    '''
    MotionPlanner: Moves the pen to absolute positions, at drawing speed
    while engaged and at moving speed while raised.
    '''

    def __init__(self, bot, pen, pacer):
        self.bot = bot
        self.pen = pen
        self.pacer = pacer

    def move_to(self, point, immediate=False):
        '''
        Move to point (x, y), absolute machine units, clamped to the machine area.
        Return the distance moved (0 if already there), or None if the point
        is unusable or the command was not accepted.

        The pen position is updated before the command is sent. With immediate
        set, return as soon as the EBB acknowledges the command.
        '''
        x_abs = mapping.finite_number(point[0])
        y_abs = mapping.finite_number(point[1])
        if x_abs is None or y_abs is None:
            logger.error('Invalid move input: %r', point)
            return None

        x_abs, y_abs = mapping.clamp_to_area(self.bot, x_abs, y_abs)

        delta_x = int(round(x_abs - self.pen.x))
        delta_y = int(round(y_abs - self.pen.y))

        if delta_x == 0 and delta_y == 0:
            return 0.0

        distance = plot_utils.distance(delta_x, delta_y)
        speed = self.bot.speed_drawing if self.pen.engaged else self.bot.speed_moving
        duration = move_duration(distance, speed)

        self.pen.last_duration = duration
        self.pen.x = x_abs
        self.pen.y = y_abs

        steps_x, steps_y = orient_steps(self.bot, delta_x, delta_y)
        if not self.pacer.move(duration, steps_x, steps_y, immediate):
            return None
        return distance

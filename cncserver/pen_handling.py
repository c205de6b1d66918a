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
pen_handling.py

Set the tool height: move the servo, then hold the EBB motion queue until
the servo has had time to arrive.

'''
import logging

from cncserver import ebb_commands
from cncserver import mapping

logger = logging.getLogger(__name__)


class HeightController:
    '''
    HeightController: Main class for raising, lowering, and partially lowering
    the tool, keeping pen.height and pen.state up to date.
    '''

    def __init__(self, bot, pen, pacer):
        self.bot = bot
        self.pen = pen
        self.pacer = pacer

    def set_height(self, height_input):
        '''
        Move the servo to a Preset or Fraction (or a raw request value).
        Return the applied Preset or Fraction, or None on failure.

        The servo position is loaded into the SP position register and
        triggered, then a zero-distance SM move of the servo travel time makes
        the EBB wait before starting any following motion.
        '''
        height_input = mapping.parse_height_input(height_input)
        servo_value, state = mapping.resolve_height(self.bot, height_input)
        v_time = mapping.pro_rate_duration(self.bot, self.pen.height, servo_value)

        logger.debug('Height %r: servo %s over %s ms', state, servo_value, v_time)

        if not self.pacer.send(ebb_commands.setup(
                ebb_commands.SERVO_POSITION_REGISTER, servo_value)):
            return None
        if not self.pacer.send(ebb_commands.pen_trigger(False)):
            return None

        self.pen.height = servo_value
        self.pen.state = state

        if not self.pacer.block(v_time):
            return None
        return state

    def raise_pen(self):
        ''' Raise the tool to the "up" preset '''
        return self.set_height('up')

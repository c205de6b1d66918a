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
ebb_commands.py

Format the small subset of EiBotBoard commands used by cncserver.
http://evil-mad.github.io/EggBot/ebb.html

Strings are returned without the trailing carriage return; the transport
adds the line terminator when writing.

"""

SERVO_POSITION_REGISTER = 5 # SC,5: servo position used by the SP trigger
SERVO_RATE_REGISTER = 10    # SC,10: servo rate of change, both directions


def setup(reg_id, value):
    ''' Set a numbered configuration register: "SC,<id>,<value>" '''
    return 'SC,{0},{1}'.format(int(reg_id), int(value))


def enable_motors(precision):
    '''
    Enable both motors at the given step precision: "EM,<precision>"
    # If precision == 1, -> 16X microstepping
    # If precision == 5, -> No microstepping
    '''
    return 'EM,{0}'.format(precision)


def disable_motors():
    ''' Disable both motors: "EM,0,0" '''
    return 'EM,0,0'


def pen_trigger(engaged):
    ''' Trigger the servo to its raised (0) or engaged (1) position '''
    return 'SP,{0}'.format(1 if engaged else 0)


def timed_move(duration, steps_x, steps_y):
    '''
    Timed XY move: "SM,<duration>,<steps_x>,<steps_y>"
    A duration of zero makes the EBB misbehave; never format one.
    '''
    duration = max(int(duration), 1)
    return 'SM,{0},{1},{2}'.format(duration, int(steps_x), int(steps_y))

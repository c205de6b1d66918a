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
mapping.py

Conversions from request values to machine values: percentages of the work
area to absolute positions, and height requests to servo output values.

Functions here do not touch the pen state or the serial port.

"""

import math

from plotink import plot_utils # https://github.com/evil-mad/plotink

from cncserver.errors import InvalidInputError
from cncserver.pen_state import Preset, Fraction, UP


def finite_number(value):
    ''' Return value as a float, or None if it is not a finite number '''
    if isinstance(value, bool):
        return None
    try:
        value = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def to_absolute(bot, pct_x, pct_y):
    '''
    Convert percentages of the work area (0-100 on each axis) into absolute
    machine units. The work area begins at (work_left, work_top) and ends at
    the far edges of the maximum area.
    Return (x, y), or None if either input is not a finite number.
    '''
    pct_x = finite_number(pct_x)
    pct_y = finite_number(pct_y)
    if pct_x is None or pct_y is None:
        return None

    pct_x = plot_utils.constrainLimits(pct_x, 0, 100)
    pct_y = plot_utils.constrainLimits(pct_y, 0, 100)

    x_abs = bot.work_left + (pct_x / 100) * (bot.max_width - bot.work_left)
    y_abs = bot.work_top + (pct_y / 100) * (bot.max_height - bot.work_top)
    return (x_abs, y_abs)


def clamp_to_area(bot, x_abs, y_abs):
    ''' Constrain an absolute position to the machine's maximum area '''
    return (plot_utils.constrainLimits(x_abs, 0, bot.max_width),
            plot_utils.constrainLimits(y_abs, 0, bot.max_height))


def parse_height_input(value):
    '''
    Convert a request value into a Preset or Fraction.
    Numbers and numeric strings are fractions; other strings are preset names.
    '''
    if isinstance(value, (Preset, Fraction)):
        return value
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return Preset(value.strip())
    else:
        number = finite_number(value)
        if number is None:
            raise InvalidInputError('Unusable height value: {0!r}'.format(value))
    if not math.isfinite(number):
        raise InvalidInputError('Unusable height value: {0!r}'.format(value))
    return Fraction(number)


def _preset_or(bot, name, default):
    percent = bot.preset(name)
    return default if percent is None else percent


def resolve_height(bot, height_input):
    '''
    Resolve a Preset or Fraction to (servo_value, state).

    Presets are percentages of the full servo range; an unknown name is
    treated as "up". Fractions run from 0 ("up") to 1 ("paint") and use only
    the range between those two calibration points. The fraction is inverted
    and truncated to one decimal place of percent before scaling.
    The returned state is the Preset or Fraction that was applied.
    '''
    servo_min = bot.servo_min
    servo_max = bot.servo_max
    span = bot.servo_range

    if isinstance(height_input, Fraction):
        fraction = plot_utils.constrainLimits(abs(height_input.value), 0, 1)
        state = Fraction(fraction)
        percent = int((1 - fraction) * 1000) / 10
        low = servo_min + (_preset_or(bot, 'paint', 100) / 100) * span
        high = servo_min + (_preset_or(bot, 'up', 0) / 100) * span
    else:
        state = height_input
        percent = bot.preset(height_input.name)
        if percent is None: # Unknown name, default to up
            percent = _preset_or(bot, 'up', 0)
            state = UP
        low = servo_min
        high = servo_max

    percent = plot_utils.constrainLimits(percent, 0, 100)
    servo_value = int(round((percent / 100) * (high - low) + low))
    return int(plot_utils.constrainLimits(servo_value, servo_min, servo_max)), state


def pro_rate_duration(bot, old_height, new_height):
    '''
    Servo travel time, ms, for a move from old_height to new_height:
    the full-range duration scaled by the fraction of the range traveled, plus 1.
    If no height has been set yet, the full-range duration is used.
    '''
    if not old_height:
        return bot.servo_duration
    return int(round((abs(new_height - old_height) / bot.servo_range)
        * bot.servo_duration)) + 1

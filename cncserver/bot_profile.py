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
bot_profile.py

Read-only description of one machine: geometry, speeds, servo calibration,
orientation, tools, and controller identity.

The classes defined by this module are:

* ToolProfile: Position and wiggle settings of one tool (paint well, water dish)

* ControllerIdentity: Strings used to recognize the controller among serial ports

* BotProfile: Main class; built once from a bot params object

'''
from types import MappingProxyType


class ToolProfile: # pylint: disable=too-few-public-methods
    ''' ToolProfile: Absolute position of a tool plus its wiggle settings '''

    __slots__ = ('name', 'x', 'y', 'wiggle_axis', 'wiggle_travel', 'wiggle_iterations')

    def __init__(self, name, settings):
        self.name = name
        self.x = float(settings['x'])
        self.y = float(settings['y'])
        self.wiggle_axis = str(settings.get('wiggle_axis', 'xy'))
        self.wiggle_travel = float(settings.get('wiggle_travel', 0))
        self.wiggle_iterations = int(settings.get('wiggle_iterations', 0))

    @property
    def position(self):
        ''' (x, y) in absolute machine units '''
        return (self.x, self.y)


class ControllerIdentity: # pylint: disable=too-few-public-methods
    ''' ControllerIdentity: USB identity fragments and serial settings '''

    def __init__(self, pnp_id_fragment, manufacturer_fragment, baud_rate):
        self.pnp_id_fragment = pnp_id_fragment
        self.manufacturer_fragment = manufacturer_fragment
        self.baud_rate = int(baud_rate)


class BotProfile: # pylint: disable=too-many-instance-attributes
    '''
    BotProfile: Immutable machine description.
    bot_params is a module or config object with the attributes found in
    machine_types/watercolorbot.py, plus the global orientation settings.
    '''

    def __init__(self, bot_params):
        self.name = getattr(bot_params, 'name', 'bot')

        self.work_left = float(bot_params.work_area_left)
        self.work_top = float(bot_params.work_area_top)
        self.max_width = float(bot_params.max_area_width)
        self.max_height = float(bot_params.max_area_height)

        self.speed_drawing = float(bot_params.speed_drawing)
        self.speed_moving = float(bot_params.speed_moving)
        self.speed_precision = int(bot_params.speed_precision)

        self.servo_min = int(bot_params.servo_min)
        self.servo_max = int(bot_params.servo_max)
        self.servo_rate = int(bot_params.servo_rate)
        self.servo_duration = int(bot_params.servo_duration)
        self.servo_presets = MappingProxyType(
            {key: float(value) for key, value in bot_params.servo_presets.items()})

        self.invert_x = bool(getattr(bot_params, 'invert_axis_x', False))
        self.invert_y = bool(getattr(bot_params, 'invert_axis_y', False))
        self.swap_motors = bool(getattr(bot_params, 'swap_motors', False))

        self.tools = MappingProxyType({name: ToolProfile(name, settings)
            for name, settings in bot_params.tools.items()})

        self.controller = ControllerIdentity(bot_params.controller,
            bot_params.manufacturer, bot_params.baud_rate)

        self._frozen = True

    def __setattr__(self, key, value):
        if getattr(self, '_frozen', False):
            raise AttributeError('BotProfile is read-only')
        super().__setattr__(key, value)

    @property
    def servo_range(self):
        ''' Full servo output range '''
        return self.servo_max - self.servo_min

    def preset(self, name):
        ''' Percentage for a named servo preset, or None if not defined '''
        return self.servo_presets.get(name)

    def tool(self, name):
        ''' ToolProfile for name, or None if not defined '''
        return self.tools.get(name)

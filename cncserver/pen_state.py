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
pen_state.py

Runtime state of the pen (tool head) and the values used to request a height.

The classes defined by this module are:

* Preset: Height request by preset name, e.g. "up", "paint", "wash"

* Fraction: Height request as a fraction, 0 (up) to 1 (fully engaged)

* PenState: Data storage class for position, height, tool, and counters

'''

DEFAULT_TOOL = 'color0'


class Preset:
    ''' Preset: named servo height '''

    __slots__ = ('name',)

    def __init__(self, name):
        self.name = str(name)

    @property
    def engaged(self):
        ''' Any preset other than "up" puts the tool down '''
        return self.name != 'up'

    def export(self):
        ''' Plain value for state snapshots '''
        return self.name

    def __eq__(self, other):
        return isinstance(other, Preset) and other.name == self.name

    def __hash__(self):
        return hash(('preset', self.name))

    def __repr__(self):
        return 'Preset({0!r})'.format(self.name)


class Fraction:
    ''' Fraction: height between up (0) and fully engaged (1) '''

    __slots__ = ('value',)

    def __init__(self, value):
        self.value = float(value)

    @property
    def engaged(self):
        ''' Any nonzero fraction puts the tool down '''
        return self.value > 0

    def export(self):
        ''' Plain value for state snapshots '''
        return self.value

    def __eq__(self, other):
        return isinstance(other, Fraction) and other.value == self.value

    def __hash__(self):
        return hash(('fraction', self.value))

    def __repr__(self):
        return 'Fraction({0!r})'.format(self.value)


UP = Preset('up')


class PenState: # pylint: disable=too-many-instance-attributes
    '''
    PenState: The single mutable record of pen status, owned by one controller.
    x, y: absolute position, machine units
    state: Preset or Fraction last applied
    height: last servo output value; 0 until a height has been set
    '''

    def __init__(self):
        self.x = 0 # Assume we start in top left corner
        self.y = 0
        self.state = UP
        self.height = 0
        self.tool = DEFAULT_TOOL
        self.last_duration = 0 # Last movement timing, ms
        self.distance_counter = 0.0 # Running tally of pen-down travel
        self.simulation = False

    def park(self):
        ''' Reset XY position only. '''
        self.x = 0
        self.y = 0

    @property
    def engaged(self):
        ''' True while the tool is down '''
        return self.state.engaged

    @property
    def position(self):
        ''' (x, y) in absolute machine units '''
        return (self.x, self.y)

    def add_distance(self, distance):
        ''' Accumulate travel distance, only while engaged '''
        if self.engaged and distance > 0:
            self.distance_counter += distance

    def reset_counter(self):
        ''' Zero the running distance tally '''
        self.distance_counter = 0.0

    def snapshot(self):
        ''' Return a plain dict copy of the state '''
        return {
            'x': self.x,
            'y': self.y,
            'state': self.state.export(),
            'height': self.height,
            'tool': self.tool,
            'last_duration': self.last_duration,
            'distance_counter': self.distance_counter,
            'simulation': self.simulation,
        }

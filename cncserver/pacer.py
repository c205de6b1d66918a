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
pacer.py

Feed commands to the EBB one at a time, and hold back the completion of
timed commands until the board has nearly finished executing them.

The EBB acknowledges a motion command as soon as it is queued, not when it
is done. Each wait ends buffer_latency_offset ms before the nominal end of
the command, so the next command is already queued when it finishes.

"""

import time

from cncserver import ebb_commands


class CommandPacer:
    '''
    CommandPacer: Serialized writes through a link (an object with a
    write(command) method returning True or False), with paced waits.
    '''

    def __init__(self, link, buffer_latency_offset=50, sleep_fun=time.sleep):
        self.link = link
        self.buffer_latency_offset = buffer_latency_offset
        self.sleep_fun = sleep_fun

    def delay_for(self, duration):
        ''' Time, ms, to wait after a command of the given nominal duration '''
        return max(duration - self.buffer_latency_offset, 0)

    def wait(self, duration):
        ''' Sleep out the paced delay for a command of nominal duration (ms) '''
        delay = self.delay_for(duration)
        if delay > 0:
            self.sleep_fun(delay / 1000.0)

    def send(self, command, duration=0, immediate=False):
        '''
        Write one command. For timed commands (duration > 0) wait out the
        paced delay afterwards, unless immediate is set.
        Return True if the link accepted the command.
        '''
        result = self.link.write(command)
        if result and duration and not immediate:
            self.wait(duration)
        return result

    def move(self, duration, steps_x, steps_y, immediate=False):
        ''' Send a timed "SM" move and pace it '''
        duration = max(int(duration), 1)
        return self.send(ebb_commands.timed_move(duration, steps_x, steps_y),
            duration, immediate)

    def block(self, duration):
        '''
        Zero-distance move: makes the EBB hold its motion buffer for duration
        ms, e.g. while the servo settles.
        '''
        return self.move(duration, 0, 0)

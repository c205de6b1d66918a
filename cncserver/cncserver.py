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
cncserver.py

Controller for EiBotBoard painting and drawing machines (WaterColorBot,
EggBot): pen position and height, tool changes, and the serial connection.

Operations come in two forms. The plain methods (set_pen, set_height, ...)
queue the operation on a single worker and report through an optional
on_done(success) callback. The *_now methods run immediately on the calling
thread and return the result; use them only from one thread at a time,
and not while queued operations are pending.

Requires Python 3.7 or newer and Pyserial 3.5 or newer.
"""

__version__ = '0.9.0'

from importlib import import_module
import logging
import time

from ink_extensions_utils import message

from cncserver import bot_profile
from cncserver import config_utils
from cncserver import connection
from cncserver import ebb_commands
from cncserver import mapping
from cncserver import motion
from cncserver import pacer
from cncserver import pen_handling
from cncserver import pen_state
from cncserver import tool_change
from cncserver import transport
from cncserver.operation_queue import OperationQueue

logger = logging.getLogger(__name__)
package_logger = logging.getLogger('cncserver')


class CNCServer: # pylint: disable=too-many-instance-attributes, too-many-public-methods
    """ Main class for cncserver """

    logging_attrs = {"default_handler": message.UserMessageHandler()}

    def __init__(self, default_logging=True, user_message_fun=message.emit, params=None,
                 bot_params=None, sleep_fun=time.sleep):
        if params is None:
            params = import_module("cncserver.cncserver_conf") # Default configuration file
        if bot_params is None:
            bot_params = config_utils.load_bot_params(params)
        self.params = params
        self.version_string = __version__
        self.user_message_fun = user_message_fun

        if default_logging: # logging setup
            package_logger.setLevel(logging.INFO)
            if self.logging_attrs["default_handler"] not in package_logger.handlers:
                package_logger.addHandler(self.logging_attrs["default_handler"])
        if params.debug:
            package_logger.setLevel(logging.DEBUG) # by default level is INFO

        self.bot = bot_profile.BotProfile(bot_params)
        self.pen = pen_state.PenState()
        self.connection = connection.ConnectionManager(self.bot, self.pen,
            params.serial_path, user_message_fun, params.debug)
        self.pacer = pacer.CommandPacer(self.connection, params.buffer_latency_offset,
            sleep_fun)
        self.motion = motion.MotionPlanner(self.bot, self.pen, self.pacer)
        self.heights = pen_handling.HeightController(self.bot, self.pen, self.pacer)
        self.tools = tool_change.ToolChangeSequencer(self.bot, self.pen, self.motion,
            self.heights)
        self.queue = OperationQueue()

    # Connection ===============================================================

    def connect(self, on_done=None):
        ''' Queue connect_now(); on_done(True) if connected '''
        self.queue.submit(self.connect_now, (), on_done)

    def continue_simulation(self, on_done=None):
        ''' Queue continue_simulation_now() '''
        self.queue.submit(self.continue_simulation_now, (), on_done)

    def add_disconnect_listener(self, listener):
        ''' Call listener() if the serial connection is lost '''
        self.connection.add_disconnect_listener(listener)

    def close(self):
        ''' Finish queued operations, stop the worker, and close the port '''
        self.queue.stop()
        self.connection.close()

    @staticmethod
    def list_available_transports():
        ''' Describe all serial ports reported by the platform '''
        return transport.list_ports()

    # State ====================================================================

    def get_pen_state(self):
        ''' Snapshot of the pen state, as a dict '''
        return self.pen.snapshot()

    def list_tools(self):
        ''' Names of the tools defined for this bot '''
        return list(self.bot.tools.keys())

    def reset_position_offset(self, on_done=None):
        ''' Queue reset_position_offset_now() '''
        self.queue.submit(self.reset_position_offset_now, (), on_done)

    # Queued operations ========================================================

    def set_pen(self, request, on_done=None):
        ''' Queue set_pen_now(request) '''
        self.queue.submit(self.set_pen_now, (request,), on_done)

    def set_height(self, height, on_done=None):
        ''' Queue set_height_now(height) '''
        self.queue.submit(self.set_height_now, (height,), on_done)

    def set_tool(self, tool_name, on_done=None):
        ''' Queue set_tool_now(tool_name); an unknown tool reports failure '''
        self.queue.submit(self.set_tool_now, (tool_name,), on_done)

    def disable_motors(self, on_done=None):
        ''' Queue disable_motors_now() '''
        self.queue.submit(self.disable_motors_now, (), on_done)

    def park(self, on_done=None):
        ''' Queue park_now() '''
        self.queue.submit(self.park_now, (), on_done)

    def send_setup(self, reg_id, value, on_done=None):
        ''' Queue send_setup_now(reg_id, value) '''
        self.queue.submit(self.send_setup_now, (reg_id, value), on_done)

    def wait(self):
        ''' Block until all queued operations have finished '''
        self.queue.join()

    # Immediate operations =====================================================

    def connect_now(self):
        ''' Connect to the bot, or continue in simulation mode. Return True if connected. '''
        connected = self.connection.connect()
        if connected:
            self.user_message_fun('Connected to ' + self.bot.name)
        return connected

    def continue_simulation_now(self):
        ''' Stop using the serial port and simulate all commands '''
        self.connection.continue_simulation()
        return True

    def reset_position_offset_now(self):
        ''' Declare the current physical position to be (0, 0), without moving '''
        self.pen.park()
        logger.info('Motor offset reset to zero')
        return True

    def set_pen_now(self, request):
        '''
        Update the pen from a request dict. Recognized keys, handled in this
        order, the first applicable one ending the request:
            reset_counter: zero the distance counter
            simulation: True to simulate, False to (re)connect to the bot
            state: new height (preset name or fraction), if it differs
            x, y: move to this position, percent of the work area;
                with park, relative to the machine origin instead;
                with ignore_timeout, do not wait out the move.
        Return True on success.
        '''
        if request.get('reset_counter'):
            self.pen.reset_counter()
            return True

        if request.get('simulation') is not None:
            simulation = bool(request['simulation'])
            if simulation == self.pen.simulation:
                return True
            if simulation:
                return self.continue_simulation_now()
            return self.connect_now()

        if request.get('state') is not None:
            new_state = mapping.parse_height_input(request['state'])
            if new_state != self.pen.state:
                return self.set_height_now(new_state)

        if request.get('x') is not None:
            point = mapping.to_absolute(self.bot, request.get('x'), request.get('y'))
            if point is None:
                logger.error('Invalid pen position request: %r', request)
                return False

            if request.get('park'):
                point = (point[0] - self.bot.work_left, point[1] - self.bot.work_top)
                if self.pen.x == 0 and self.pen.y == 0:
                    return False # Don't repark if already parked

            distance = self.motion.move_to(point, bool(request.get('ignore_timeout')))
            if distance is None:
                return False
            self.pen.add_distance(distance)
        return True

    def set_height_now(self, height):
        ''' Set the pen height to a preset name or fraction. Return True on success. '''
        return self.heights.set_height(height) is not None

    def set_tool_now(self, tool_name):
        '''
        Change to tool_name. Raise ToolNotFoundError if it is not defined;
        return True when the tool change is complete.
        '''
        return self.tools.set_tool(tool_name)

    def disable_motors_now(self):
        ''' Disable (unlock) the stepper motors '''
        logger.info('Disabling motors')
        return self.pacer.send(ebb_commands.disable_motors())

    def park_now(self):
        ''' Raise the pen and return to the machine origin '''
        logger.info('Parking Pen...')
        if not self.set_height_now('up'):
            return False
        return self.set_pen_now({'x': 0, 'y': 0, 'park': True})

    def send_setup_now(self, reg_id, value):
        ''' Send a raw "SC" configuration command '''
        return self.pacer.send(ebb_commands.setup(reg_id, value))

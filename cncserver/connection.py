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
connection.py

Find and open the EBB serial port, and fall back to simulation mode when no
board is available or the link is lost. There is no automatic retry: after
a failure, commands are simulated until connect() is called again.

"""

from enum import Enum
import logging

from cncserver import ebb_commands
from cncserver import transport
from cncserver.errors import TransportLostError, TransportUnavailableError

logger = logging.getLogger(__name__)

AUTO_PATH = '{auto}'


class ConnectionState(Enum):
    ''' Connection manager states '''
    DISCONNECTED = 0
    PROBING = 1
    CONNECTED = 2
    SIMULATING = 3


class ConnectionManager:
    '''
    ConnectionManager: Owns the active transport (serial or simulated) and
    the simulation flag of the pen state. Acts as the link for the pacer.
    '''

    def __init__(self, bot, pen, serial_path=None, message_fun=None, debug=False):
        self.bot = bot
        self.pen = pen
        self.serial_path = serial_path
        self.message_fun = message_fun
        self.debug = debug
        self.transport = transport.SimulatedTransport()
        self.state = ConnectionState.DISCONNECTED
        self.disconnect_listeners = []

    def _message(self, text):
        if self.message_fun is not None:
            self.message_fun(text)

    def auto_detect(self):
        ''' True if no explicit serial path is configured '''
        return self.serial_path in (None, '', AUTO_PATH)

    def find_port(self):
        '''
        Return the serial path to open: the configured path if there is one,
        otherwise the first port matching the controller identity.
        Raise TransportUnavailableError if none is found.
        '''
        if not self.auto_detect():
            logger.info('Using passed serial port "%s"...', self.serial_path)
            return self.serial_path

        logger.info('Finding available serial ports...')
        port_list = transport.list_ports()
        logger.debug('Full available port data: %s', port_list)
        logger.info('Available serial ports: %s',
            ', '.join(port['device'] for port in port_list) or 'None')

        path = transport.match_controller(port_list, self.bot.controller)
        if path is None:
            raise TransportUnavailableError(
                "{0} not found. Are you sure it's connected?".format(
                    self.bot.controller.pnp_id_fragment))
        return path

    def connect(self):
        '''
        Probe for and open the controller, then send the bot configuration.
        Return True if connected; otherwise continue in simulation mode and
        return False.
        '''
        self.state = ConnectionState.PROBING
        try:
            path = self.find_port()
            logger.info('Attempting to open serial port: "%s"...', path)
            new_transport = transport.SerialTransport.open(path,
                self.bot.controller.baud_rate)
        except TransportUnavailableError as err:
            logger.warning(str(err))
            self._message('Failed to connect to ' + self.bot.name + '.')
            self.continue_simulation()
            return False

        self.transport.close()
        self.transport = new_transport
        self.serial_path = path
        self.pen.simulation = False
        self.state = ConnectionState.CONNECTED
        logger.info('Serial connection open at %s bps', self.bot.controller.baud_rate)
        self.send_bot_config()
        return True

    def send_bot_config(self):
        ''' One-time EBB configuration: servo rate and motor step precision '''
        logger.info('Sending EBB config...')
        self.write(ebb_commands.setup(ebb_commands.SERVO_RATE_REGISTER, self.bot.servo_rate))
        self.write(ebb_commands.enable_motors(self.bot.speed_precision))

    def continue_simulation(self):
        ''' Replace the transport with the simulator; all commands now succeed. '''
        if self.state is not ConnectionState.SIMULATING:
            logger.warning('Continuing in SIMULATION MODE')
        self.transport.close()
        self.transport = transport.SimulatedTransport()
        self.pen.simulation = True
        self.state = ConnectionState.SIMULATING

    def transport_lost(self, reason=''):
        '''
        Handle a link that closed while connected: forget the serial path so that
        the next connect() probes again, simulate, and tell listeners.
        '''
        logger.warning('Serial connection to "%s" lost! Did it get unplugged? %s',
            self.serial_path, reason)
        self.serial_path = None
        self.continue_simulation()
        for listener in self.disconnect_listeners:
            listener()

    def add_disconnect_listener(self, listener):
        ''' Register a function to call, without arguments, when the link is lost '''
        self.disconnect_listeners.append(listener)

    def write(self, command):
        '''
        Write a command through the active transport. A lost link is not an
        error for the caller: the command is treated as simulated.
        '''
        if self.debug:
            word = 'Simulating' if self.transport.simulated else 'Executing'
            logger.debug('%s serial command: %s', word, command)
        try:
            return self.transport.write(command)
        except TransportLostError as err:
            self.transport_lost(str(err))
            return True

    def close(self):
        ''' Close any open port; the manager returns to the disconnected state '''
        self.transport.close()
        self.transport = transport.SimulatedTransport()
        self.state = ConnectionState.DISCONNECTED

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
transport.py

Serial links to the EiBotBoard: a real pyserial link and an inert simulated
one with the same interface, plus port enumeration and controller matching.

Requires Pyserial 3.5 or newer.

"""

import logging

import serial
from serial.tools.list_ports import comports

from plotink import ebb_serial # https://github.com/evil-mad/plotink

from cncserver.errors import TransportLostError, TransportUnavailableError

logger = logging.getLogger(__name__)

READ_TIMEOUT = 1.0  # Seconds to wait for each line of response
READ_RETRIES = 10   # Empty reads tolerated before giving up on an "OK"


def list_ports():
    '''
    Return a list of dicts describing every serial port reported by the
    platform, in the order reported.
    '''
    port_list = []
    for port in comports():
        port_list.append({
            'device': port.device,
            'description': port.description or '',
            'hwid': port.hwid or '',
            'manufacturer': port.manufacturer or '',
        })
    return port_list


def match_controller(port_list, identity):
    '''
    Find the first port that looks like our controller: either its hardware
    id contains the PNP id fragment (typical on Linux), or its manufacturer
    string contains the manufacturer fragment (other platforms).
    Return the device name, or None if no port matches.
    '''
    for port in port_list:
        if identity.pnp_id_fragment and identity.pnp_id_fragment in port['hwid']:
            return port['device']
        if identity.manufacturer_fragment and\
                identity.manufacturer_fragment in port['manufacturer']:
            return port['device']
    return None


class SimulatedTransport:
    ''' SimulatedTransport: Accepts every command and sends nothing '''

    simulated = True

    def write(self, command): # pylint: disable=unused-argument
        ''' Pretend to send a command; always succeeds '''
        return True

    def close(self):
        ''' Nothing to close '''


class SerialTransport:
    '''
    SerialTransport: An open serial port to an EiBotBoard.
    Each write waits for the board's "OK" acknowledgment.
    '''

    simulated = False

    def __init__(self, port, path=None):
        self.port = port
        self.path = path

    @classmethod
    def open(cls, path, baud_rate):
        ''' Open the port at path; raise TransportUnavailableError on failure '''
        try:
            port = serial.Serial(path, baudrate=baud_rate, timeout=READ_TIMEOUT)
        except (serial.SerialException, OSError, ValueError) as err:
            raise TransportUnavailableError(
                'Serial port {0} failed to open: {1}'.format(path, err)) from err
        return cls(port, path)

    def write(self, command):
        '''
        Send one command, terminated with a carriage return.
        Return True if the EBB acknowledged it with "OK", False for an
        unexpected response or a timeout. Raise TransportLostError if the
        link itself has failed.
        '''
        try:
            self.port.write((command + '\r').encode('ascii'))
            response = self.port.readline().decode('ascii', errors='replace')
            n_retry_count = 0
            while len(response) == 0 and n_retry_count < READ_RETRIES:
                # get new response to replace null response if necessary
                response = self.port.readline().decode('ascii', errors='replace')
                n_retry_count += 1
        except (serial.SerialException, OSError) as err:
            raise TransportLostError(str(err)) from err

        if response.strip().startswith("OK"):
            return True
        if response:
            logger.error('Error: Unexpected response from EBB.')
            logger.error('   Command: %s', command)
            logger.error('   Response: %s', response.strip())
        else:
            logger.error('EBB Serial Timeout after command: %s', command)
        return False

    def close(self):
        ''' Close the port; errors while closing are ignored by closePort '''
        ebb_serial.closePort(self.port)

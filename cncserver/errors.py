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
errors.py

Exception classes raised by cncserver.

"""


class CNCServerError(Exception):
    """ Base class for all cncserver errors """


class InvalidInputError(CNCServerError, ValueError):
    """ Non-finite coordinates or otherwise unusable request values """


class ToolNotFoundError(CNCServerError, KeyError):
    """ The requested tool is not defined in the bot profile """

    def __init__(self, tool_name):
        super().__init__(tool_name)
        self.tool_name = tool_name

    def __str__(self):
        return 'Tool not found: ' + str(self.tool_name)


class TransportUnavailableError(CNCServerError):
    """ No matching controller was found, or the serial port failed to open """


class TransportLostError(CNCServerError):
    """ The serial link closed or failed while connected """

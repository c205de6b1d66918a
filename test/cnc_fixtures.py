""" Shared configuration and recording helpers for the cncserver tests. """

from mock import MagicMock

from cncserver import cncserver
from cncserver.config_utils import FakeConfigModule


def bot_params(**overrides):
    ''' A small, round-numbered bot profile '''
    values = {
        'name': 'TestBot',
        'controller': 'EiBotBoard',
        'manufacturer': 'SchmalzHaus',
        'baud_rate': 9600,
        'work_area_left': 0,
        'work_area_top': 0,
        'max_area_width': 1000,
        'max_area_height': 800,
        'speed_drawing': 200,
        'speed_moving': 400,
        'speed_precision': 1,
        'servo_min': 1000,
        'servo_max': 2000,
        'servo_rate': 0,
        'servo_duration': 500,
        'servo_presets': {'up': 20, 'draw': 100, 'paint': 90, 'wash': 80},
        'tools': {
            'water0': {'x': 50, 'y': 50, 'wiggle_axis': 'y', 'wiggle_travel': 10,
                       'wiggle_iterations': 2},
            'color0': {'x': 100, 'y': 100, 'wiggle_axis': 'xy', 'wiggle_travel': 20,
                       'wiggle_iterations': 4},
        },
        'swap_motors': False,
        'invert_axis_x': False,
        'invert_axis_y': False,
    }
    values.update(overrides)
    return FakeConfigModule(values)


def global_params(**overrides):
    ''' Global settings with auto-detection and no debug output '''
    values = {
        'bot_type': 'testbot',
        'serial_path': None,
        'buffer_latency_offset': 50,
        'swap_motors': False,
        'invert_axis_x': False,
        'invert_axis_y': False,
        'debug': False,
        'bot_overrides': {},
    }
    values.update(overrides)
    return FakeConfigModule(values)


class RecordingTransport:
    '''
    Stands in for a connected serial transport: records every command.
    Commands starting with any prefix in fail_prefixes are refused.
    '''

    simulated = False

    def __init__(self, fail_prefixes=()):
        self.commands = []
        self.fail_prefixes = tuple(fail_prefixes)
        self.closed = False

    def write(self, command):
        self.commands.append(command)
        return not command.startswith(self.fail_prefixes)

    def close(self):
        self.closed = True


class RecordingLink:
    ''' Minimal pacer link: records commands and returns a fixed result '''

    def __init__(self, result=True):
        self.commands = []
        self.result = result

    def write(self, command):
        self.commands.append(command)
        return self.result


def make_server(bot_overrides=None, global_overrides=None):
    '''
    CNCServer wired to a RecordingTransport as if connected, with a mock sleep.
    Returns (server, transport).
    '''
    server = cncserver.CNCServer(default_logging=False, user_message_fun=MagicMock(),
        params=global_params(**(global_overrides or {})),
        bot_params=bot_params(**(bot_overrides or {})), sleep_fun=MagicMock())
    recorder = RecordingTransport()
    server.connection.transport = recorder
    return server, recorder

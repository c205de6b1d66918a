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
config_utils.py

Load global and bot configuration files. A configuration is a python file
or module of plain assignments; see cncserver_conf.py.

"""

import copy
import errno
import logging
import runpy
import sys
import warnings

logger = logging.getLogger(__name__)

GLOBAL_CONF = 'cncserver.cncserver_conf'
MACHINE_TYPES = 'cncserver.machine_types'

# Global settings that are applied to the bot profile
BOT_ORIENTATION_KEYS = ['swap_motors', 'invert_axis_x', 'invert_axis_y']


def load_configs(config_list):
    ''' config_list is in order of priority, either file names or module names '''

    config_dict = {}

    rev_list = copy.copy(config_list)
    rev_list.reverse() # load in opposite order of priority
    for config in rev_list:
        config_dict.update(load_config(config))

    return config_dict


def load_config(config):
    ''' Run a config file or module and return its public names as a dict '''
    if config is None:
        return {}

    config_dict = None
    try: # try assuming config is a filename
        config_dict = runpy.run_path(config)
    except SyntaxError as se:
        logger.error('Config file %s contains a syntax error on line %s:', se.filename, se.lineno)
        logger.error('    %s', se.text)
        logger.error('The config file should be a python file (e.g., a file that ends in ".py").')
        sys.exit(1)
    except OSError as ose:
        if len(config) > 3 and config[-3:] == ".py" and ose.errno == errno.ENOENT:
            # if config is a filename ending in ".py" but it doesn't appear to exist
            logger.error("Could not find any file named %s.", config)
            logger.error("Check the spelling and/or location.")
            sys.exit(1)
        else:
            # Either config is a config file that doesn't have a .py AND it doesn't exist
            # or config is a module
            with warnings.catch_warnings():
                # runpy warns when running a module that is already imported
                warnings.simplefilter("ignore")
                try: # assume config is a module
                    config_dict = runpy.run_module(config)
                except ImportError: # oops, no module named that
                    logger.error("Could not find any file or module named %s.", config)
                    sys.exit(1)

    return { key: value for key, value in config_dict.items() if key[0] != "_" }


def get_configured_value(attr, configs):
    """ configs is a list of configuration dicts, in order of priority.

    e.g. if configs is a list [user_config, other_config], then the value for
    "buffer_latency_offset" will be user_config's value if user_config defines it,
    and if not, the value will be other_config's.
    """
    for config in configs:
        if attr in config:
            return config[attr]
    raise ValueError("The given attr ({}) was not found in any of the configurations.".format(attr))


def load_global_params(user_config=None):
    ''' Global parameters: an optional user config file over the defaults '''
    return FakeConfigModule(load_configs([user_config, GLOBAL_CONF]))


def load_bot_params(global_params, bot_config=None):
    '''
    Bot profile parameters for global_params.bot_type, with the matching entry of
    global_params.bot_overrides and the global orientation settings merged in.
    An explicit bot_config file or module takes the place of the machine_types module.
    '''
    if bot_config is None:
        bot_config = '.'.join([MACHINE_TYPES, global_params.bot_type])
    bot_dict = load_config(bot_config)

    overrides = getattr(global_params, 'bot_overrides', None) or {}
    bot_dict.update(overrides.get(global_params.bot_type, {}))

    for key in BOT_ORIENTATION_KEYS:
        bot_dict[key] = get_configured_value(key, [global_params.__dict__, {key: False}])

    logger.debug('Loaded configuration for %s', bot_dict.get('name', global_params.bot_type))
    return FakeConfigModule(bot_dict)


class FakeConfigModule:
    ''' just turns a dict into an object
    so attributes can be set/retrieved object-style '''
    def __init__(self, a_dict):
        self.__dict__ = a_dict

# cncserver_conf.py
# Part of the cncserver driver software
#
# Copyright 2023 Windell H. Oskay, Evil Mad Scientist Laboratories
#
# "Change numbers here, not there." :)


'''
Global control parameters:

These values are used as defaults by cncserver. Make a copy of this file and
 pass it (or a module name) to config_utils.load_configs() to override them;
 values in the copy take priority over the values here.

Bot specific settings (geometry, servo calibration, tools) live in the
 machine_types package, selected with bot_type below.

'''

# DEFAULT VALUES

bot_type = 'watercolorbot'  # Name of a module in cncserver.machine_types
                            # 'watercolorbot' (Default) or 'eggbot'

serial_path = None      # Serial port to use, e.g. '/dev/ttyACM0' or 'COM4'
                            # None or '{auto}' (Default) will search for the
                            # first port matching the bot's controller identity

buffer_latency_offset = 50  # Time, ms, to issue each command ahead of the
                            # nominal completion of the previous one, so that
                            # the EBB motion buffer is never starved. Default 50

swap_motors = False     # Exchange the X and Y motor outputs. Default False
invert_axis_x = False   # Reverse X stepper direction. Default False
invert_axis_y = False   # Reverse Y stepper direction. Default False

debug = False           # Log every executed or simulated serial command

bot_overrides = {}      # Per-bot overrides of machine_types values, e.g.:
                            # {'eggbot': {'servo_max': 1234}}

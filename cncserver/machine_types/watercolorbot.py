# watercolorbot.py
# Bot profile for the WaterColorBot
#
# Copyright 2023 Windell H. Oskay, Evil Mad Scientist Laboratories
#
# Units for positions are motor steps; speeds are steps per second.

name = 'WaterColorBot'

controller = 'EiBotBoard'   # Fragment of the USB hardware id (PNP id), Linux
manufacturer = 'SchmalzHaus' # Fragment of the USB manufacturer string, other OSes
baud_rate = 9600

work_area_left = 3100   # Left edge of the paper, clear of the paint tray
work_area_top = 0
max_area_width = 12000  # Full travel of the carriage
max_area_height = 8000

speed_drawing = 1500    # Speed while the brush is down
speed_moving = 3500     # Speed while the brush is raised
speed_precision = 1     # EM step precision; 1 is 16X microstepping

servo_min = 12750       # Servo output value at 0%
servo_max = 17000       # Servo output value at 100%
servo_rate = 0          # SC,10 servo rate; 0 is full speed
servo_duration = 340    # Time, ms, for a full-range servo sweep

servo_presets = {       # Named heights, percent of the servo range
    'up': 0,
    'draw': 100,
    'paint': 90,
    'wash': 80,
}

tools = {
    'water0': {'x': 450, 'y': 1400, 'wiggle_axis': 'y', 'wiggle_travel': 250,
               'wiggle_iterations': 4},
    'water1': {'x': 450, 'y': 3850, 'wiggle_axis': 'y', 'wiggle_travel': 250,
               'wiggle_iterations': 4},
    'water2': {'x': 450, 'y': 6300, 'wiggle_axis': 'y', 'wiggle_travel': 250,
               'wiggle_iterations': 4},
    'color0': {'x': 1800, 'y': 850, 'wiggle_axis': 'xy', 'wiggle_travel': 150,
               'wiggle_iterations': 8},
    'color1': {'x': 1800, 'y': 1800, 'wiggle_axis': 'xy', 'wiggle_travel': 150,
               'wiggle_iterations': 8},
    'color2': {'x': 1800, 'y': 2750, 'wiggle_axis': 'xy', 'wiggle_travel': 150,
               'wiggle_iterations': 8},
    'color3': {'x': 1800, 'y': 3700, 'wiggle_axis': 'xy', 'wiggle_travel': 150,
               'wiggle_iterations': 8},
    'color4': {'x': 1800, 'y': 4650, 'wiggle_axis': 'xy', 'wiggle_travel': 150,
               'wiggle_iterations': 8},
    'color5': {'x': 1800, 'y': 5600, 'wiggle_axis': 'xy', 'wiggle_travel': 150,
               'wiggle_iterations': 8},
    'color6': {'x': 1800, 'y': 6550, 'wiggle_axis': 'xy', 'wiggle_travel': 150,
               'wiggle_iterations': 8},
    'color7': {'x': 1800, 'y': 7500, 'wiggle_axis': 'xy', 'wiggle_travel': 150,
               'wiggle_iterations': 8},
}

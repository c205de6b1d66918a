# eggbot.py
# Bot profile for the EggBot
#
# Copyright 2023 Windell H. Oskay, Evil Mad Scientist Laboratories
#
# Units for positions are motor steps; speeds are steps per second.
# The X axis is the egg rotation motor, the Y axis is the pen arm.

name = 'EggBot'

controller = 'EiBotBoard'
manufacturer = 'SchmalzHaus'
baud_rate = 9600

work_area_left = 0
work_area_top = 0
max_area_width = 3200
max_area_height = 800

speed_drawing = 300
speed_moving = 700
speed_precision = 1

servo_min = 7500
servo_max = 28000
servo_rate = 0
servo_duration = 1200

servo_presets = {
    'up': 0,
    'draw': 100,
    'paint': 100,
    'wash': 100,
}

tools = {
    'color0': {'x': 0, 'y': 0, 'wiggle_axis': 'y', 'wiggle_travel': 0,
               'wiggle_iterations': 0},
}

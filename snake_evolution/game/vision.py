import numpy as np

from .direction import Direction


READINGS_PER_DIRECTION = 3  # food, body, wall


def vision_size(directions=None):
    if directions is None:
        directions = Direction.vision_order()
    return READINGS_PER_DIRECTION * len(directions)


def vision(game, directions=None):
    """Ray-cast from the head in every direction

    Each direction contributes three readings: distance to food, distance to
    the nearest body segment and distance to the wall. Food and body readings
    keep the first hit along the ray and stay 0 when nothing is seen; the wall
    ends the ray, so its reading is always positive.
    """
    if directions is None:
        directions = Direction.vision_order()

    body = set(game.body)
    readings = np.zeros(vision_size(directions), dtype=np.float32)

    for i, direction in enumerate(directions):
        food_slot = i * READINGS_PER_DIRECTION
        body_slot = food_slot + 1
        wall_slot = food_slot + 2

        position = game.head
        distance = 0
        while True:
            position = position + direction.offset
            distance += 1

            if not game.in_bounds(position):
                readings[wall_slot] = distance
                break

            if readings[food_slot] == 0 and position == game.food:
                readings[food_slot] = distance
            if readings[body_slot] == 0 and position in body:
                readings[body_slot] = distance

    return readings

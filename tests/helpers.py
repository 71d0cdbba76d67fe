"""Shared test helpers."""

import random


class FixedRandom(random.Random):
    """Random source that replays the given draws."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def random(self):
        return self._values.pop(0)

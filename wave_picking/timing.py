# -*- coding: utf-8 -*-
# ARQUIVO: timing.py

import time


class Stopwatch:
    """
    Cronômetro de parede. O solver só precisa de `get_time()`, em segundos.
    """

    def __init__(self):
        self._start_time = None

    def start(self) -> 'Stopwatch':
        self._start_time = time.time()
        return self

    def get_time(self) -> float:
        if self._start_time is None:
            return 0.0
        return time.time() - self._start_time

# timestep.py

"""
Fixed-timestep accumulator.

The display runs at whatever rate the host manages; the simulation always
steps in TICK_DURATION_NS increments. Each frame the host reports how much
wall-clock time passed and gets back how many ticks are due (zero or more).
"""

import constants


class FixedTimestep:
    def __init__(self, tick_ns: int = constants.TICK_DURATION_NS):
        self.tick_ns = tick_ns
        self.accumulated_ns = 0

    def add_time(self, elapsed_ns: int) -> int:
        """Banks wall time and returns the number of whole ticks now due."""
        self.accumulated_ns += elapsed_ns
        due, self.accumulated_ns = divmod(self.accumulated_ns, self.tick_ns)
        return due

    def reset(self):
        """Drops banked time, e.g. while paused, so resuming doesn't burst."""
        self.accumulated_ns = 0

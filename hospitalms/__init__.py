"""Console hospital management: accounts, rooms, schedules, inventory and bills."""

__version__ = "0.1.0"
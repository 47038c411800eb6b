"""Orchestration of the ride list and its stores."""

from .factory import create_ride_log
from .ride_log import RideLog, on_change

__all__ = ["RideLog", "create_ride_log", "on_change"]

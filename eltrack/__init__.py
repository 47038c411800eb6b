"""
ElTrack - Elevator Ride Tracker

Record elevator rides, browse the ride history, export it as CSV,
and keep it in sync with a cloud record service.
"""

__version__ = "1.0.0"
__author__ = "ElTrack Contributors"

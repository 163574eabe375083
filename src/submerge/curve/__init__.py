"""Sensor force curve (F versus water added) for charting and playback."""

from .compute import compute_sensor_curve, playback_masses

__all__ = ["compute_sensor_curve", "playback_masses"]

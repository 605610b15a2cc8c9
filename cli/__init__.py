"""Terminal front end for the sensor dashboard."""

__all__ = []

"""Value types and wire schemas for sensor readings."""

"""Robot models for a 2D top-view simulator: wheel motors, telemetry and paths."""

__version__ = "0.1.0"

__all__ = ["path", "physics_bot", "telemetry", "wheel_motor"]
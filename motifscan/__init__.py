"""Position weight matrix construction, promoter scanning and random background sequences."""

__version__ = "0.1.0"

__all__ = ["background", "cli", "pwm", "sequences"]
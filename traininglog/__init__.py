"""Training Log: a personal workout tracker with a rotating 12-day plan."""

__version__ = "0.1.0"

"""Terminal maze simulation where Nemo searches for the exit among roaming sharks."""

__version__ = "1.0.0"
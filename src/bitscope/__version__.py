"""Version information for bitscope."""

__version__ = "0.3.0"

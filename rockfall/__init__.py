"""
Rockfall - a small pygame arcade platform.

Provides:
- logging: Per-module console logging
- games: Base game class, standard game states and input handling
"""

__version__ = "1.0.0"

"""
Holiday Lights - LED matrix scene player.

Composes images, text and procedural patterns into 64x64 frames and
cycles a set of scenes on a timer.
"""

__version__ = "0.1.0"

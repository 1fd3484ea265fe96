"""
Stickman Fighter
================
Two stickmen, one arena: a keyboard fighting game with a computer opponent.
"""

__version__ = "1.0.0"

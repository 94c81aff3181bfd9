"""
Code Invaders - type the falling keywords before they land.
"""

__version__ = "0.1.0"

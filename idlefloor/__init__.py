"""
idlefloor
---------
Tick-based incremental game: count, fight up the floors, shop for upgrades.
"""

__version__ = "0.3.0"

"""
idlefloor/flags/__init__.py
---------------------------
Deferred flag engine.

Exports:
    Flag          - Base enum for a closed set of flags
    FlagQueue     - Marks flags and drains them one generation per tick
    flag_handler  - Decorator registering a variant's handler
"""

from idlefloor.flags.flag import Flag, FlagQueue, flag_handler

__all__ = [
    'Flag',
    'FlagQueue',
    'flag_handler',
]

"""
Core services exports.

Provides configuration loading, input latching and the display window.
"""

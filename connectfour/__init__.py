"""
connectfour - Two-player Connect Four game core

This package provides the board representation, win detection and turn
management for Connect Four, plus a terminal front end that drives them.
"""

# Version number
__version__ = '0.1.0'

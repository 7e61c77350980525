"""
connectfour.interfaces - Front ends for playing Connect Four

This package contains the command-line shell that renders the board
and feeds column choices to the GameEngine.
"""

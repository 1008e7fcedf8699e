"""
Termux Dev Tools — setup and maintenance toolkit for a mobile terminal.
"""

__version__ = "0.1.0"

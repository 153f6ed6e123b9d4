"""
eolapi - client for the Encyclopedia of Life API.
"""

__version__ = "0.1.0"

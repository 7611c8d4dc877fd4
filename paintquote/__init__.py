"""
PaintQuote — quoting engine for painting contractors.
"""

__version__ = "1.0.0"

"""
Interactive editor for piecewise cubic Bézier splines.
"""
__version__ = "0.1.0"

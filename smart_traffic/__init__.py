"""
Smart intersection control.
"""
__version__ = "0.1.0"

"""
Aircraft Load & Trim Sheet.

Reads load-planning workbooks into a normalized, aircraft-aware load plan.
"""

__version__ = "1.0.0"

"""
power4.interfaces - User interfaces for Power4

This package contains the terminal interface: setup prompts, line input
and board display.
"""

# Don't import anything here to avoid circular imports
__all__ = []

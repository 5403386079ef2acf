"""
connect4.interfaces - User interfaces for Connect Four

This package contains the console input provider, display and session menu.
"""

# Don't import anything here to avoid circular imports
__all__ = []

"""Core utilities shared across the syntax and analysis layers.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError, depth_clamp

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

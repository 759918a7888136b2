"""
Module: utils
Description: Package initialization for utility functions.

Current utilities:
- logger: Structured logging configuration and helpers
- zero: Zero-value detection for option fields
- timeout: Timeout-scoped execution of transport calls
"""

__all__ = []

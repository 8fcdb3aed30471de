"""
Utility functions and helpers.

This module contains shared utilities used across compact_schema components.

Components:
    - logging: Logging configuration for command-line use

Example:
    ```python
    from compact_schema.utils import setup_logging

    setup_logging(level="DEBUG", log_file="compact_schema.log")
    ```
"""

from compact_schema.utils.logging import setup_logging

__all__ = ["setup_logging"]

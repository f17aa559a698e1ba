"""
SnipShare.

- backend/: Snippet API, persistence, configuration and logging
"""

__version__ = "0.1.0"

"""
tasker: a small MongoDB-backed command-line task manager.

Components:
- config.py: environment-driven Settings
- logging_setup.py: console + file logging
- tasks/: models, errors, store adapter and repository
- cli/: composition root, command dispatcher, presenter, entry point
"""

__version__ = "0.1.0"

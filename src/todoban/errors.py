"""
todoban exception hierarchy.

Board operations never raise for bad user input; these cover the process
around them (configuration, startup).
"""


class TodobanError(Exception):
    """Exit code 1: generic failure outside a board operation."""

    exit_code = 1


class ConfigError(TodobanError):
    """Exit code 2: bad configuration value."""

    exit_code = 2

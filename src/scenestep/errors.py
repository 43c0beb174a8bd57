"""Errors raised by the scene stepper."""


class ConfigurationError(ValueError):
    """A required component is missing, so the stepper cannot run."""

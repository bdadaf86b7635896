"""Exceptions raised by the verification harness."""


class ConfigurationError(Exception):
    """Raised when the harness or a check suite is set up incorrectly."""


class DuplicateCheckError(ConfigurationError):
    """Raised when a check name is registered twice."""


class CheckExecutionFailure(Exception):
    """Raised by a check when it cannot produce a verdict.

    The harness turns it into a failing outcome; it never leaves ``run()``.
    """

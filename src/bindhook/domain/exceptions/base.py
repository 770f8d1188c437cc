"""Base exceptions for bindhook domain."""


class BindHookError(Exception):
    """Root exception for all bindhook errors.

    All domain exceptions inherit from this.
    Allows catching all bindhook-specific errors.
    """

"""Domain exceptions for solid base analysis."""


class SolidBaseError(Exception):
    """Base class for all solid base analysis errors."""


class UnknownClassError(SolidBaseError, KeyError):
    """A class key was queried that was never registered in the hierarchy."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Class '{self.key}' is not registered in the hierarchy."


class ResolutionCycleError(SolidBaseError):
    """Resolution revisited a class whose computation is still in progress."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Cyclic solid base resolution detected at '{key}'.")
        self.key = key


class ConfigurationError(SolidBaseError):
    """A configuration value has the wrong shape."""

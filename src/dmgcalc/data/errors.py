"""Custom exceptions for data loading and validation."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a class table file cannot be read."""


class DataValidationError(DataError):
    """Raised when JSON content fails structural validation."""


class DataReferenceError(DataError):
    """Raised when a unit references missing related data."""


class UnknownClassError(DataReferenceError):
    """Raised when a unit's class is not present in the class registry."""

    def __init__(self, class_name: str) -> None:
        super().__init__(f"Unknown unit class '{class_name}'.")
        self.class_name = class_name

# src/catai/errors.py


class CataiError(Exception):
    """Base class for every error catai reports to the operator."""


class ArgumentError(CataiError):
    """Bad or missing command-line value."""


class InvalidSizeError(ArgumentError):
    def __init__(self, value: str):
        super().__init__(f"Invalid max size format: {value}")
        self.value = value


class PathNotFoundError(CataiError):
    def __init__(self, path: str):
        super().__init__(f"Path not found: {path}")
        self.path = path


class FileReadError(CataiError):
    """A selected file could not be read. Fatal for the run."""


class ClassificationReadError(CataiError):
    """A candidate could not be sampled; the classifier treats it as binary."""


class ClipboardDeliveryError(CataiError):
    """The clipboard helper could not be run or reported failure."""


class OutputWriteError(CataiError):
    """The --output file could not be written."""

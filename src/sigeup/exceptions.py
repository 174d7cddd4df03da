class SigeupError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class IncompleteEntryError(SigeupError):
    """Date, start time or end time missing when registering work."""


class InvalidTimeError(SigeupError, ValueError):
    """Time string is not a valid 24-hour HH:MM value."""

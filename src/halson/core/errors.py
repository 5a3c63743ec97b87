class HalsonError(Exception):
    """Base error for HAL document handling."""


class HalsonParseError(HalsonError):
    pass


class HalsonValidationError(HalsonError):
    pass


__all__ = [
    "HalsonError",
    "HalsonParseError",
    "HalsonValidationError",
]

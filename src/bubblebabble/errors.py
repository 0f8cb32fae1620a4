"""
Exception types raised by the bubblebabble package.
"""


class BubbleBabbleError(Exception):
    """Base exception for bubblebabble errors"""

    pass


class InvalidArgumentError(BubbleBabbleError, ValueError):
    """Caller-supplied argument is out of range or of the wrong kind"""

    pass


class DecodeError(BubbleBabbleError, ValueError):
    """Encoded string is malformed or fails its checksum"""

    pass

class EmptyBatch(Exception):
    """Raised when submitting a collection that holds no todos"""


class MissingHandoff(Exception):
    """Raised when the handed-off todo list is absent or was already taken"""


class InvalidBatch(ValueError):
    """Raised when a request body carries no usable `todos` list"""

    message = "No todos provided"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class RoastRequestFailed(Exception):
    """Raised by the client when the roast endpoint cannot deliver a batch"""

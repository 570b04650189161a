"""
RoomUpdateError - Raised by a RoomRepository when a room cannot be persisted.
"""


class RoomUpdateError(Exception):
    """Exception raised when the room store rejects an update."""

    def __init__(self, message: str = "Failed to update room"):
        super().__init__(message)
        self.message = message

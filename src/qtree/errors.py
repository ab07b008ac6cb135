"""Exception hierarchy for qtree."""


class QuestionTreeError(Exception):
    """Base class for all qtree errors."""
    pass


class DestinationNotFoundError(QuestionTreeError):
    """Raised by the editor when a destination id is not in the tree."""

    def __init__(self, destination_id: str):
        self.destination_id = destination_id
        super().__init__(f"Destination question not found: {destination_id}")


class InvalidDestinationError(QuestionTreeError):
    """Raised by the editor when a destination cannot receive the selection."""
    pass


class CSVParseError(QuestionTreeError):
    """Raised when CSV outline parsing fails."""
    pass

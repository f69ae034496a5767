"""
Exceptions raised by the offline analyzer.
"""


class EmptySnippetError(ValueError):
    """Raised when there is no code to analyze."""

    def __init__(self, message: str = "Code cannot be empty"):
        self.message = message
        super().__init__(message)

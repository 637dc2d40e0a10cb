class StoreError(Exception):
    """Raised by an entity store when the underlying database operation fails."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

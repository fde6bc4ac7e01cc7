class StorageError(Exception):
    """A read or write against the sessions table failed.

    Carries the driver's message; nothing in the core retries.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

"""Raised when an operation does not carry a package the caller can handle."""


class UnsupportedOperationError(TypeError):
    """The operation is not one of the variants the entry point accepts."""

    def __init__(self, operation: object, entry_point: str):
        self.operation = operation
        self.entry_point = entry_point
        super().__init__(f"{entry_point}: unsupported operation {type(operation).__name__}")

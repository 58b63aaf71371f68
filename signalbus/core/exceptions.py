"""Application-wide exception hierarchy."""


class SignalBusError(Exception):
    """Base exception for all signalbus errors."""

    def __init__(self, message: str = "", code: str = ""):
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidSignalNameError(SignalBusError, ValueError):
    """Signal name is missing, empty or not a string.

    Raised before the registry is touched, so a failed call never
    mutates or dispatches anything.
    """

    def __init__(self, message: str = "Invalid signal name", code: str = "INVALID_SIGNAL_NAME"):
        super().__init__(message, code)


class InvalidPayloadTypeError(SignalBusError, TypeError):
    """Payload type is not backed by a class the registry can check against.

    Unions, type variables and literals fall in this group. Parameterized
    generics are fine and are reduced to their origin (``list[int]`` ->
    ``list``).
    """

    def __init__(self, message: str = "Invalid payload type", code: str = "INVALID_PAYLOAD_TYPE"):
        super().__init__(message, code)

class StoreUnavailable(Exception):
    """Raised for any failure talking to the spreadsheet service."""


class AuthenticationDenied(Exception):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
        self.message = message


class ValidationFailed(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

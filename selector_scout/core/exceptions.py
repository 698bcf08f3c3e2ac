"""Exceptions raised by Selector Scout."""


class SelectorScoutError(Exception):
    """Base class for Selector Scout errors."""


class BrowserUnavailableError(SelectorScoutError):
    """
    The browser collaborator cannot be used.

    Raised when Selenium is not installed or Chrome cannot be launched.
    Carries a remediation hint for the user.
    """

    def __init__(self, message: str, hint: str = ""):
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        message = super().__str__()
        return f"{message}\n{self.hint}" if self.hint else message

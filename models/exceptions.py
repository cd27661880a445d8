"""
Exceptions raised by the installer scripts.

Every error carries an optional numeric code so a failing install can be
traced back to the exact check that rejected it.
"""

from typing import Optional


class InstallerError(Exception):
    """Base class for all installer errors"""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"{self.message} (#{self.code})"


class InvalidConfigurationError(InstallerError):
    """
    Raised for configuration the installer cannot act on:
    - malformed or unresolvable hook references
    - conflicting redefinition of the named application paths
    """


class UnexpectedOperationError(InstallerError):
    """Raised when a package event carries an operation other than install/update"""

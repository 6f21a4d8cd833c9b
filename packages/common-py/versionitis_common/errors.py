"""
Versionitis Error Classes

Every failure the data layer reports is an exception rooted at
``VersionitisError``. Each error carries a stable ``code`` so that front ends
(CLI, persistence tooling) can present or serialize it consistently.

Usage:
    from versionitis_common.errors import ParseError

    raise ParseError("1.x.3", "component 'x' is not a number")
"""

from typing import Any, Dict, Optional


class VersionitisError(Exception):
    """Base class for all versionitis errors."""

    code = "VERSIONITIS_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


class ParseError(VersionitisError, ValueError):
    """
    Raised when text does not match the expected grammar.

    Attributes:
        text: The offending input
        detail: Diagnostic describing what was expected
    """

    code = "PARSE_ERROR"

    def __init__(self, text: str, detail: str):
        self.text = text
        self.detail = detail
        super().__init__(f"unable to parse: '{text}' error: '{detail}'")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["text"] = self.text
        data["detail"] = self.detail
        return data


class InvalidPackageVersion(VersionitisError):
    """Raised when a checked insert is not strictly greater than the latest version."""

    code = "INVALID_PACKAGE_VERSION"

    def __init__(self, package: str):
        self.package = package
        super().__init__(f"InvalidPackageVersion: {package}")


class DuplicatePackageDependency(VersionitisError):
    """Raised when a manifest already holds a constraint for a dependency name."""

    code = "DUPLICATE_PACKAGE_DEPENDENCY"

    def __init__(self, package_name: str):
        self.package_name = package_name
        super().__init__(f"DuplicatePackageDependency: {package_name}")


class UnknownPackage(VersionitisError, LookupError):
    """Raised when a package name was never registered."""

    code = "UNKNOWN_PACKAGE"

    def __init__(self, package_name: str):
        self.package_name = package_name
        super().__init__(f"UnknownPackage: {package_name}")


class SerializationError(VersionitisError):
    """Raised when a persisted document cannot be turned back into core values."""

    code = "SERIALIZATION_ERROR"

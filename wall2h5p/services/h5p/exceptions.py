# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom exceptions for H5P conversion.

This module defines the exception hierarchy for conversion operations:
- H5PError: Base exception for all H5P-related errors
- UnsupportedTemplateError: No converter exists for the template kind
- H5PConversionError: A converter failed unexpectedly

Missing or malformed fields are never errors: converters fill them with
defaults. Only UnsupportedTemplateError is part of the normal contract.
"""


class H5PError(Exception):
    """Base exception for all H5P-related errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict | None = None):
        """Initialize H5P error.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation with details if available."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class UnsupportedTemplateError(H5PError):
    """No converter is registered for the declared template kind.

    Callers map this to a client-side status (e.g. HTTP 422) rather than
    a server failure.

    Attributes:
        template: The template kind as declared by the activity.
        normalized: The normalized lookup key that failed to match.
        supported: Normalized kinds the registry does support.
    """

    def __init__(
        self,
        template: str,
        normalized: str,
        supported: list[str] | None = None,
        details: dict | None = None,
    ):
        """Initialize unsupported template error.

        Args:
            template: The template kind as declared by the activity.
            normalized: The normalized lookup key.
            supported: Normalized kinds the registry does support.
            details: Optional dictionary with additional error context.
        """
        self.template = template
        self.normalized = normalized
        self.supported = supported or []
        super().__init__(f'Unsupported template type: "{template}"', details)

    def __str__(self) -> str:
        """Return string representation with the normalized kind."""
        base = f"{self.message} (normalized: {self.normalized!r})"
        if self.supported:
            base = f"{base} - Supported: {', '.join(self.supported)}"
        return base


class H5PConversionError(H5PError):
    """Activity to H5P conversion error.

    Raised when a converter fails on input it should have absorbed.

    Attributes:
        content_type: The target H5P content type.
        source_format: Description of the source format.
    """

    def __init__(
        self,
        message: str,
        content_type: str | None = None,
        source_format: str | None = None,
        details: dict | None = None,
    ):
        """Initialize H5P conversion error.

        Args:
            message: Human-readable error description.
            content_type: The target H5P content type.
            source_format: Description of the source format.
            details: Optional dictionary with additional error context.
        """
        self.content_type = content_type
        self.source_format = source_format
        super().__init__(message, details)

    def __str__(self) -> str:
        """Return string representation with conversion context."""
        base = self.message
        if self.content_type:
            base = f"[{self.content_type}] {base}"
        if self.source_format:
            base = f"{base} (from: {self.source_format})"
        return base

"""
SRN Error Taxonomy
==================
Typed exceptions raised by component validation, the builder, the parser and
the hierarchy operations.

Hierarchy:
- SRNError (ValueError)
  - ValidationError:  a single component failed its rules
  - BuilderError:     a builder step failed (wraps ValidationError)
  - ParseError:       a string could not be parsed into an SRN
  - HierarchyError:   an operation over two SRNs is not defined for them
  - SerializationError: JSON/YAML data has the wrong shape

Every error names the component that failed, so messages read like
"Category: cannot start or end with a hyphen".
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ValidationErrorKind(Enum):
    """Reasons a component value can be rejected."""

    EMPTY = "empty"
    TOO_LONG = "too_long"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_EDGE_CHARACTER = "invalid_edge_character"
    RESERVED_CHARACTER = "reserved_character"
    TOO_MANY_PARTS = "too_many_parts"


class BuilderErrorKind(Enum):
    """Reasons a builder step can fail."""

    MISSING_PART = "missing_part"
    INVALID_PREFIX = "invalid_prefix"
    TOO_MANY_PARTS = "too_many_parts"
    INVALID_COMPONENT = "invalid_component"
    CONSUMED = "consumed"


class ParseErrorKind(Enum):
    """Reasons a string can fail to parse."""

    INVALID_FORMAT = "invalid_format"
    COMPONENT_INVALID = "component_invalid"


class SRNError(ValueError):
    """Base class for all SRN errors."""


class ValidationError(SRNError):
    """
    A component value violated its rules.

    Attributes:
        kind: Which rule failed
        component: Component name (e.g. "Domain", "Part")
        detail: Human-readable reason
        max_length: Limit that was exceeded (TOO_LONG / TOO_MANY_PARTS only)
    """

    def __init__(
        self,
        kind: ValidationErrorKind,
        component: str,
        detail: str,
        max_length: Optional[int] = None,
    ):
        self.kind = kind
        self.component = component
        self.detail = detail
        self.max_length = max_length
        super().__init__(f"{component}: {detail}")


class BuilderError(SRNError):
    """
    A builder step failed.

    The stage that raised is consumed; construction must restart from a
    fresh SRNBuilder.
    """

    def __init__(
        self,
        kind: BuilderErrorKind,
        component: str,
        detail: str,
        validation_error: Optional[ValidationError] = None,
    ):
        self.kind = kind
        self.component = component
        self.detail = detail
        self.validation_error = validation_error
        super().__init__(f"Builder error ({component}): {detail}")

    @classmethod
    def missing_part(cls, component: str) -> "BuilderError":
        return cls(BuilderErrorKind.MISSING_PART, component, "missing required part")

    @classmethod
    def wrap(cls, err: ValidationError) -> "BuilderError":
        """Wrap a component ValidationError raised during a builder step."""
        if err.kind is ValidationErrorKind.TOO_MANY_PARTS:
            kind = BuilderErrorKind.TOO_MANY_PARTS
        else:
            kind = BuilderErrorKind.INVALID_COMPONENT
        return cls(kind, err.component, err.detail, validation_error=err)


class ParseError(SRNError):
    """
    An SRN string could not be parsed.

    Attributes:
        kind: INVALID_FORMAT (field count / scheme) or COMPONENT_INVALID
        component: Failing component name, or None for format errors
        detail: Human-readable reason
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        detail: str,
        component: Optional[str] = None,
    ):
        self.kind = kind
        self.component = component
        self.detail = detail
        if component:
            message = f"Failed to parse {component}: {detail}"
        else:
            message = f"Invalid SRN format: {detail}"
        super().__init__(message)

    @classmethod
    def invalid_format(cls, detail: str) -> "ParseError":
        return cls(ParseErrorKind.INVALID_FORMAT, detail)

    @classmethod
    def component_invalid(cls, err: ValidationError) -> "ParseError":
        return cls(ParseErrorKind.COMPONENT_INVALID, err.detail, component=err.component)


class HierarchyError(SRNError):
    """Two SRNs cannot be combined or ordered."""


class SerializationError(SRNError):
    """Serialized data does not have the shape of the requested type."""

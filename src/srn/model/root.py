"""
Root segment of an SRN.

A root is `<label>_<id>` where `<id>` is a 26-character sortable encoding of
a 128-bit identifier produced by one of two strategies:

- RootStrategy.TIME_ORDERED:        UUIDv7, new on every call, k-sortable
- RootStrategy.CONTENT_ADDRESSABLE: UUIDv5 of the label, deterministic

Example:
    generate_time_ordered("profile")
    -> Root(value="profile_01j9x5m3k8q4r7t2v6w0y1z3a5")

Roots read back from text (Root.from_string) keep the text verbatim; when the
suffix decodes to an identifier its strategy is recovered from the UUID
version, otherwise the root is opaque (strategy None).
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from srn.errors import ValidationError, ValidationErrorKind
from srn.model.components import RESERVED_SEPARATORS
from srn.model.ids import (
    content_id,
    decode_id,
    encode_id,
    new_time_ordered_id,
    timestamp_ms,
)

logger = logging.getLogger(__name__)

ROOT_NAME = "Root"
ID_SEPARATOR = "_"
MAX_TIME_ORDERED_LABEL_BYTES = 255
MAX_CONTENT_LABEL_BYTES = 1024
MAX_ROOT_BYTES = MAX_CONTENT_LABEL_BYTES + 1 + 26


class RootStrategy(Enum):
    """How the root identifier is produced."""

    TIME_ORDERED = "time_ordered"
    CONTENT_ADDRESSABLE = "content_addressable"

    @classmethod
    def from_name(cls, name: str) -> "RootStrategy":
        normalized = name.strip().lower().replace("-", "_")
        for strategy in cls:
            if strategy.value == normalized:
                return strategy
        choices = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown root strategy: {name}. Must be one of: {choices}")


_VERSION_TO_STRATEGY = {
    7: RootStrategy.TIME_ORDERED,
    5: RootStrategy.CONTENT_ADDRESSABLE,
}


def _check_text(raw: str, max_bytes: int) -> None:
    if not isinstance(raw, str):
        raise TypeError(f"Root label must be a string, got {type(raw).__name__}")
    if not raw:
        raise ValidationError(ValidationErrorKind.EMPTY, ROOT_NAME, "cannot be empty")
    size = len(raw.encode("utf-8"))
    if size > max_bytes:
        raise ValidationError(
            ValidationErrorKind.TOO_LONG,
            ROOT_NAME,
            f"length exceeds maximum of {max_bytes} bytes (got {size})",
            max_length=max_bytes,
        )
    if any(sep in raw for sep in RESERVED_SEPARATORS):
        raise ValidationError(
            ValidationErrorKind.RESERVED_CHARACTER,
            ROOT_NAME,
            "cannot contain the reserved separators ':' or '/'",
        )
    if not raw.isprintable():
        raise ValidationError(
            ValidationErrorKind.INVALID_CHARACTERS,
            ROOT_NAME,
            "cannot contain control characters",
        )


@dataclass(frozen=True)
class Root:
    """
    Root anchor of an SRN hierarchy.

    Equality and hashing use the canonical text only.

    Attributes:
        value: Canonical text, "<label>_<id>" for generated roots
        label: Human-readable prefix
        id: Decoded identifier, None for opaque roots
        strategy: Strategy that produced the id, None for opaque roots
    """

    value: str
    label: str = field(default="", compare=False)
    id: Optional[uuid.UUID] = field(default=None, compare=False)
    strategy: Optional[RootStrategy] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        _check_text(self.value, MAX_ROOT_BYTES)
        if not self.label:
            object.__setattr__(self, "label", self.value)

    @classmethod
    def generate(cls, label: str, strategy: RootStrategy = RootStrategy.TIME_ORDERED) -> "Root":
        if strategy is RootStrategy.TIME_ORDERED:
            return generate_time_ordered(label)
        if strategy is RootStrategy.CONTENT_ADDRESSABLE:
            return generate_content_addressable(label)
        raise ValueError(f"Unsupported root strategy: {strategy!r}")

    @classmethod
    def from_string(cls, raw: str) -> "Root":
        """
        Recover a Root from its canonical text.

        The text is stored as-is. If it ends in "_<26-char id>" the id is
        decoded and the strategy inferred from its UUID version.
        """
        _check_text(raw, MAX_ROOT_BYTES)
        label, sep, suffix = raw.rpartition(ID_SEPARATOR)
        if sep and label:
            decoded = decode_id(suffix)
            if decoded is not None:
                strategy = _VERSION_TO_STRATEGY.get(decoded.version)
                if strategy is not None:
                    return cls(value=raw, label=label, id=decoded, strategy=strategy)
        logger.debug("Treating root %r as opaque", raw)
        return cls(value=raw)

    @property
    def is_time_ordered(self) -> bool:
        return self.strategy is RootStrategy.TIME_ORDERED

    @property
    def timestamp_ms(self) -> Optional[int]:
        """Creation time (Unix ms) for time-ordered roots."""
        if not self.is_time_ordered or self.id is None:
            return None
        return timestamp_ms(self.id)

    def sort_key(self) -> int:
        """Integer that orders time-ordered roots by creation."""
        if not self.is_time_ordered or self.id is None:
            raise TypeError(f"Root {self.value!r} is not time-ordered")
        return self.id.int

    def __str__(self) -> str:
        return self.value


def _compose(label: str, identifier: uuid.UUID, strategy: RootStrategy) -> Root:
    value = f"{label}{ID_SEPARATOR}{encode_id(identifier)}"
    return Root(value=value, label=label, id=identifier, strategy=strategy)


def generate_time_ordered(label: str) -> Root:
    """
    Build a fresh, k-sortable root for `label`.

    Raises:
        ValidationError: label empty, over 255 UTF-8 bytes,
            contains ':' / '/' or control characters
    """
    _check_text(label, MAX_TIME_ORDERED_LABEL_BYTES)
    return _compose(label, new_time_ordered_id(), RootStrategy.TIME_ORDERED)


def generate_content_addressable(label: str) -> Root:
    """
    Build the deterministic root for `label`.

    Raises:
        ValidationError: label empty, over 1024 UTF-8 bytes,
            contains ':' / '/' or control characters
    """
    _check_text(label, MAX_CONTENT_LABEL_BYTES)
    root = _compose(label, content_id(label), RootStrategy.CONTENT_ADDRESSABLE)
    logger.debug("Generated content-addressable root %s", root.value)
    return root

"""
SRN Component Model
===================
Validated value types for the fixed segments of an SRN.

Rules (all lengths in characters, ASCII only):

- Domain:   1-63, [A-Za-z0-9.-],  no leading/trailing hyphen
            Example: my-app, acme.io
- Category: 1-63, [A-Za-z0-9-],   no leading/trailing hyphen
            Example: users
- Account:  1-63, [A-Za-z0-9_-],  no leading/trailing hyphen or underscore
            Example: tenant123, org_42
- Part:     1-63, [A-Za-z0-9_.-]
            Example: settings, v1.2
- PartList: ordered Parts, at most 10

The separators ':' and '/' are reserved in every component; they are
rejected rather than escaped.

Usage:
    from srn.model.components import Domain, Part, PartList

    domain = Domain("my-app")
    parts = PartList.of("settings", "theme")
    str(parts)  # -> "settings/theme"
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Iterator, Optional, Pattern, Tuple, Union

from srn.errors import ValidationError, ValidationErrorKind

RESERVED_SEPARATORS = (":", "/")
MAX_COMPONENT_LENGTH = 63
MAX_PARTS = 10


@dataclass(frozen=True)
class Component:
    """
    Base for single-segment components.

    Subclasses declare their rules as class attributes; construction
    validates and raises ValidationError on the first rule violated
    (empty, too long, reserved separator, invalid characters, edge).
    """

    value: str

    NAME: ClassVar[str] = "Component"
    MAX_LENGTH: ClassVar[int] = MAX_COMPONENT_LENGTH
    ALLOWED: ClassVar[Pattern[str]] = re.compile(r"[A-Za-z0-9]+")
    ALLOWED_DESCRIPTION: ClassVar[str] = "alphanumeric characters"
    EDGE_CHARACTERS: ClassVar[str] = ""
    EDGE_DESCRIPTION: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self.validate(self.value)

    @classmethod
    def new(cls, raw: str):
        """Validate `raw` and build the component."""
        return cls(raw)

    @classmethod
    def validate(cls, raw: str) -> None:
        if not isinstance(raw, str):
            raise TypeError(f"{cls.NAME} must be a string, got {type(raw).__name__}")

        if not raw:
            raise ValidationError(ValidationErrorKind.EMPTY, cls.NAME, "cannot be empty")

        if len(raw) > cls.MAX_LENGTH:
            raise ValidationError(
                ValidationErrorKind.TOO_LONG,
                cls.NAME,
                f"length exceeds maximum of {cls.MAX_LENGTH} characters (got {len(raw)})",
                max_length=cls.MAX_LENGTH,
            )

        if any(sep in raw for sep in RESERVED_SEPARATORS):
            raise ValidationError(
                ValidationErrorKind.RESERVED_CHARACTER,
                cls.NAME,
                "cannot contain the reserved separators ':' or '/'",
            )

        if not cls.ALLOWED.fullmatch(raw):
            raise ValidationError(
                ValidationErrorKind.INVALID_CHARACTERS,
                cls.NAME,
                f"can only contain {cls.ALLOWED_DESCRIPTION}",
            )

        if cls.EDGE_CHARACTERS and (
            raw[0] in cls.EDGE_CHARACTERS or raw[-1] in cls.EDGE_CHARACTERS
        ):
            raise ValidationError(
                ValidationErrorKind.INVALID_EDGE_CHARACTER,
                cls.NAME,
                f"cannot start or end with {cls.EDGE_DESCRIPTION}",
            )

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        try:
            cls.validate(raw)
        except ValidationError:
            return False
        return True

    def __str__(self) -> str:
        return self.value


class Domain(Component):
    """Resource namespace, e.g. "my-app"."""

    NAME = "Domain"
    ALLOWED = re.compile(r"[A-Za-z0-9.-]+")
    ALLOWED_DESCRIPTION = "alphanumeric characters, hyphens and dots"
    EDGE_CHARACTERS = "-"
    EDGE_DESCRIPTION = "a hyphen"


class Category(Component):
    """Service or category name, e.g. "users"."""

    NAME = "Category"
    ALLOWED = re.compile(r"[A-Za-z0-9-]+")
    ALLOWED_DESCRIPTION = "alphanumeric characters and hyphens"
    EDGE_CHARACTERS = "-"
    EDGE_DESCRIPTION = "a hyphen"


class Account(Component):
    """Owner or tenant identifier, e.g. "tenant123"."""

    NAME = "Account"
    ALLOWED = re.compile(r"[A-Za-z0-9_-]+")
    ALLOWED_DESCRIPTION = "alphanumeric characters, hyphens and underscores"
    EDGE_CHARACTERS = "-_"
    EDGE_DESCRIPTION = "a hyphen or underscore"


class Part(Component):
    """One path segment beneath the root."""

    NAME = "Part"
    ALLOWED = re.compile(r"[A-Za-z0-9_.-]+")
    ALLOWED_DESCRIPTION = "alphanumeric characters, hyphens, underscores and dots"


PartLike = Union[Part, str]


def _as_part(value: PartLike) -> Part:
    return value if isinstance(value, Part) else Part(value)


@dataclass(frozen=True)
class PartList:
    """
    Ordered, immutable sequence of Parts (the path beneath the root).

    Operations that "modify" the list return a new PartList.
    """

    parts: Tuple[Part, ...] = field(default_factory=tuple)

    NAME: ClassVar[str] = "PartList"
    MAX_PARTS: ClassVar[int] = MAX_PARTS

    def __post_init__(self) -> None:
        parts = tuple(self.parts)
        for part in parts:
            if not isinstance(part, Part):
                raise TypeError(f"PartList items must be Part, got {type(part).__name__}")
        if len(parts) > self.MAX_PARTS:
            raise ValidationError(
                ValidationErrorKind.TOO_MANY_PARTS,
                self.NAME,
                f"cannot hold more than {self.MAX_PARTS} parts (got {len(parts)})",
                max_length=self.MAX_PARTS,
            )
        object.__setattr__(self, "parts", parts)

    @classmethod
    def of(cls, *values: PartLike) -> "PartList":
        return cls(tuple(_as_part(v) for v in values))

    @classmethod
    def from_strings(cls, values: Iterable[PartLike]) -> "PartList":
        return cls(tuple(_as_part(v) for v in values))

    def append(self, value: PartLike) -> "PartList":
        return PartList(self.parts + (_as_part(value),))

    def extend(self, other: Iterable[PartLike]) -> "PartList":
        return PartList(self.parts + tuple(_as_part(v) for v in other))

    def parent(self) -> Optional["PartList"]:
        """Drop the last part; None when the list is empty."""
        if not self.parts:
            return None
        return PartList(self.parts[:-1])

    def is_prefix_of(self, other: "PartList") -> bool:
        """True if this list is an order-preserving prefix of `other`."""
        return len(self.parts) <= len(other.parts) and other.parts[: len(self.parts)] == self.parts

    def to_strings(self) -> Tuple[str, ...]:
        return tuple(p.value for p in self.parts)

    def __iter__(self) -> Iterator[Part]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __getitem__(self, index: int) -> Part:
        return self.parts[index]

    def __bool__(self) -> bool:
        return bool(self.parts)

    def __str__(self) -> str:
        return "/".join(p.value for p in self.parts)

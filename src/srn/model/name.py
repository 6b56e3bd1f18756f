"""
The SRN aggregate and its hierarchy operations.

Canonical form:
    <scheme>:<domain>:<category>:<account>:<root>[/<part_1>/.../<part_n>]

Example:
    ern:my-app:users:tenant123:profile_01j9x5m3k8q4r7t2v6w0y1z3a5/settings

SRN values are immutable; add_part, parent, with_parts and with_new_root
return new values. Ordering (<, sorted, compare) is defined only between
SRNs whose roots are time-ordered and follows root creation time.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, List, Optional

from srn.errors import HierarchyError, ValidationError, ValidationErrorKind
from srn.model.components import Account, Category, Domain, PartLike, PartList
from srn.model.root import Root, RootStrategy

DEFAULT_SCHEME = "ern"

# Fill-ins for the single-component constructors (SRN.default, SRN.with_domain, ...)
DEFAULT_DOMAIN = Domain("default")
DEFAULT_CATEGORY = Category("system")
DEFAULT_ACCOUNT = Account("account")
DEFAULT_ROOT_LABEL = "root"

_SCHEME_RE = re.compile(r"[a-z][a-z0-9-]*")


def validate_scheme(scheme: str) -> str:
    """Return `scheme` if it is a usable literal for field 0."""
    if not isinstance(scheme, str) or not _SCHEME_RE.fullmatch(scheme):
        raise ValidationError(
            ValidationErrorKind.INVALID_CHARACTERS,
            "Scheme",
            f"must start with a lowercase letter and contain only lowercase "
            f"alphanumerics and hyphens (got {scheme!r})",
        )
    return scheme


@dataclass(frozen=True)
class SRN:
    """
    Structured Resource Name.

    Attributes:
        domain: Resource namespace
        category: Service / category
        account: Owner or tenant
        root: Anchor of the hierarchy
        parts: Path beneath the root (0-10 parts)
        scheme: Literal rendered as field 0 (default "ern")
    """

    domain: Domain
    category: Category
    account: Account
    root: Root
    parts: PartList = field(default_factory=PartList)
    scheme: str = DEFAULT_SCHEME

    def __post_init__(self) -> None:
        for name, expected in (
            ("domain", Domain),
            ("category", Category),
            ("account", Account),
            ("root", Root),
        ):
            value = getattr(self, name)
            if not isinstance(value, expected):
                raise TypeError(
                    f"SRN.{name} must be {expected.__name__}, got {type(value).__name__}"
                )
        if not isinstance(self.parts, PartList):
            object.__setattr__(self, "parts", PartList.from_strings(self.parts))
        validate_scheme(self.scheme)

    # ------------------------------------------------------------------
    # Single-component constructors
    # ------------------------------------------------------------------

    @classmethod
    def default(
        cls,
        root_label: str = DEFAULT_ROOT_LABEL,
        strategy: RootStrategy = RootStrategy.TIME_ORDERED,
    ) -> "SRN":
        """
        SRN made only of defaults: default:system:account:root_<id>.

        Each call generates a new root unless `strategy` is content-addressable.
        """
        return cls(
            domain=DEFAULT_DOMAIN,
            category=DEFAULT_CATEGORY,
            account=DEFAULT_ACCOUNT,
            root=Root.generate(root_label, strategy),
        )

    @classmethod
    def with_root(
        cls,
        label: str,
        strategy: RootStrategy = RootStrategy.TIME_ORDERED,
    ) -> "SRN":
        """Default SRN whose root is generated from `label`."""
        return cls.default(root_label=label, strategy=strategy)

    @classmethod
    def with_domain(cls, domain: str) -> "SRN":
        """Default SRN in `domain`; raises ValidationError for a bad domain."""
        return replace(cls.default(), domain=Domain(domain))

    @classmethod
    def with_category(cls, category: str) -> "SRN":
        return replace(cls.default(), category=Category(category))

    @classmethod
    def with_account(cls, account: str) -> "SRN":
        return replace(cls.default(), account=Account(account))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        text = f"{self.scheme}:{self.domain}:{self.category}:{self.account}:{self.root}"
        if self.parts:
            text = f"{text}/{self.parts}"
        return text

    def __str__(self) -> str:
        return self.to_string()

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    @property
    def depth(self) -> int:
        """Number of parts beneath the root."""
        return len(self.parts)

    def add_part(self, value: PartLike) -> "SRN":
        """
        New SRN with `value` appended to the path.

        Raises:
            ValidationError: invalid part, or the path already has 10 parts
        """
        return replace(self, parts=self.parts.append(value))

    def with_parts(self, values: Iterable[PartLike]) -> "SRN":
        """New SRN with the path replaced by `values`."""
        return replace(self, parts=PartList.from_strings(values))

    def with_new_root(
        self,
        label: str,
        strategy: RootStrategy = RootStrategy.TIME_ORDERED,
    ) -> "SRN":
        """New SRN with a freshly generated root; other fields kept."""
        return replace(self, root=Root.generate(label, strategy))

    def parent(self) -> Optional["SRN"]:
        """The SRN one level up, or None at the root."""
        parent_parts = self.parts.parent()
        if parent_parts is None:
            return None
        return replace(self, parts=parent_parts)

    def ancestors(self) -> Iterator["SRN"]:
        """Yield parent, grandparent, ... up to the bare root SRN."""
        current = self.parent()
        while current is not None:
            yield current
            current = current.parent()

    def shares_namespace(self, other: "SRN") -> bool:
        """True if domain, category and account are equal."""
        if not isinstance(other, SRN):
            raise TypeError(f"Expected SRN, got {type(other).__name__}")
        return (
            self.domain == other.domain
            and self.category == other.category
            and self.account == other.account
        )

    def is_child_of(self, other: "SRN") -> bool:
        """
        True if `other` is a strict ancestor of this SRN.

        Requires equal domain/category/account/root, `other.parts` an
        order-preserving prefix of ours, and strictly more parts here.
        """
        return (
            self.shares_namespace(other)
            and self.root == other.root
            and len(other.parts) < len(self.parts)
            and other.parts.is_prefix_of(self.parts)
        )

    def __add__(self, other: "SRN") -> "SRN":
        if not isinstance(other, SRN):
            return NotImplemented
        return concatenate(self, other)

    # ------------------------------------------------------------------
    # Ordering (time-ordered roots only)
    # ------------------------------------------------------------------

    def _order_key(self) -> int:
        return self.root.sort_key()

    def __lt__(self, other: "SRN") -> bool:
        if not isinstance(other, SRN):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __le__(self, other: "SRN") -> bool:
        if not isinstance(other, SRN):
            return NotImplemented
        return self._order_key() <= other._order_key()

    def __gt__(self, other: "SRN") -> bool:
        if not isinstance(other, SRN):
            return NotImplemented
        return self._order_key() > other._order_key()

    def __ge__(self, other: "SRN") -> bool:
        if not isinstance(other, SRN):
            return NotImplemented
        return self._order_key() >= other._order_key()


def concatenate(a: SRN, b: SRN) -> SRN:
    """
    Combine two SRNs of the same namespace: `a`'s root, then `a`'s parts
    followed by `b`'s parts.

    Raises:
        HierarchyError: domain, category or account differ
        ValidationError: the combined path exceeds 10 parts
    """
    if not a.shares_namespace(b):
        raise HierarchyError(
            f"Cannot concatenate SRNs from different namespaces: "
            f"{a.domain}:{a.category}:{a.account} vs {b.domain}:{b.category}:{b.account}"
        )
    return replace(a, parts=a.parts.extend(b.parts))


def compare(x: SRN, y: SRN) -> int:
    """
    Order two SRNs by root creation time: -1, 0 or 1.

    Raises:
        HierarchyError: either root is not time-ordered
    """
    try:
        left, right = x._order_key(), y._order_key()
    except TypeError as e:
        raise HierarchyError(f"Cannot order SRNs: {e}") from e
    return (left > right) - (left < right)


def sort_by_creation(names: Iterable[SRN]) -> List[SRN]:
    """Sort time-ordered SRNs oldest first."""
    items = list(names)
    for name in items:
        if not name.root.is_time_ordered:
            raise HierarchyError(f"Cannot order SRN with non time-ordered root: {name}")
    return sorted(items, key=SRN._order_key)

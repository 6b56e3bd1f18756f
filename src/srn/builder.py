"""
SRN Builder
===========
Step-by-step construction of an SRN in the only legal order:

    SRNBuilder --Domain--> DomainBuilder --Category--> CategoryBuilder
      --Account--> AccountBuilder --Root--> RootBuilder --Part--> PartBuilder
                                             (build)      (build, Part x0-10)

Each stage class accepts exactly one component type in `with_()`, and only
RootBuilder / PartBuilder have `build()`. A static type checker therefore
rejects out-of-order chains; at runtime the stage also checks its tag and
raises BuilderError(INVALID_PREFIX).

Every stage is single-use: `with_()` or `build()` consumes it whether or not
the step succeeds, and a consumed stage raises BuilderError(CONSUMED).

Usage:
    from srn.builder import SRNBuilder
    from srn.model import Account, Category, Domain, Part, Root

    name = (
        SRNBuilder()
        .with_(Domain, "my-app")
        .with_(Category, "users")
        .with_(Account, "tenant123")
        .with_(Root, "profile")
        .with_(Part, "settings")
        .build()
    )
    str(name)  # -> "ern:my-app:users:tenant123:profile_<id>/settings"
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional, Type, TypeVar, Union

from srn.errors import BuilderError, BuilderErrorKind, ValidationError
from srn.model.components import Account, Category, Domain, Part, PartList
from srn.model.name import DEFAULT_SCHEME, SRN, validate_scheme
from srn.model.root import Root, RootStrategy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BuilderState(Enum):
    """Stage reached by a builder."""

    START = "start"
    DOMAIN = "domain"
    CATEGORY = "category"
    ACCOUNT = "account"
    ROOT = "root"
    PART = "part"


@dataclass(frozen=True)
class _Fields:
    """Components collected so far."""

    scheme: str
    strategy: RootStrategy
    domain: Optional[Domain] = None
    category: Optional[Category] = None
    account: Optional[Account] = None
    root: Optional[Root] = None
    parts: PartList = field(default_factory=PartList)

    def assemble(self) -> SRN:
        if self.domain is None:
            raise BuilderError.missing_part("Domain")
        if self.category is None:
            raise BuilderError.missing_part("Category")
        if self.account is None:
            raise BuilderError.missing_part("Account")
        if self.root is None:
            raise BuilderError.missing_part("Root")
        return SRN(
            domain=self.domain,
            category=self.category,
            account=self.account,
            root=self.root,
            parts=self.parts,
            scheme=self.scheme,
        )


def _validated(factory: Callable[[], T]) -> T:
    try:
        return factory()
    except ValidationError as e:
        raise BuilderError.wrap(e) from e


class _Stage:
    """Shared single-use mechanics for every builder stage."""

    STATE: BuilderState = BuilderState.START
    ACCEPTS: Optional[type] = None

    def __init__(self, fields: _Fields):
        self._fields = fields
        self._consumed = False

    @property
    def state(self) -> BuilderState:
        return self.STATE

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _consume(self) -> None:
        if self._consumed:
            raise BuilderError(
                BuilderErrorKind.CONSUMED,
                self.STATE.value,
                "builder stage already used; start again from SRNBuilder()",
            )
        self._consumed = True

    def _take(self, component: type) -> _Fields:
        self._consume()
        if component is not self.ACCEPTS:
            got = getattr(component, "__name__", repr(component))
            expected = self.ACCEPTS.__name__ if self.ACCEPTS else "nothing"
            raise BuilderError(
                BuilderErrorKind.INVALID_PREFIX,
                got,
                f"expected {expected} after {self.STATE.value}, got {got}",
            )
        return self._fields

    def _build(self) -> SRN:
        self._consume()
        name = self._fields.assemble()
        logger.debug("Built SRN %s", name)
        return name

    def __repr__(self) -> str:
        status = "consumed" if self._consumed else "open"
        return f"<{type(self).__name__} state={self.STATE.value} {status}>"


class SRNBuilder(_Stage):
    """
    Start stage; accepts a Domain.

    Args:
        scheme: Literal for field 0 (default "ern")
        strategy: Default root strategy for the Root step
    """

    STATE = BuilderState.START
    ACCEPTS = Domain

    def __init__(
        self,
        scheme: str = DEFAULT_SCHEME,
        strategy: RootStrategy = RootStrategy.TIME_ORDERED,
    ):
        try:
            validate_scheme(scheme)
        except ValidationError as e:
            raise BuilderError(
                BuilderErrorKind.INVALID_PREFIX, "Scheme", e.detail, validation_error=e
            ) from e
        super().__init__(_Fields(scheme=scheme, strategy=strategy))

    @classmethod
    def new(
        cls,
        scheme: str = DEFAULT_SCHEME,
        strategy: RootStrategy = RootStrategy.TIME_ORDERED,
    ) -> "SRNBuilder":
        return cls(scheme=scheme, strategy=strategy)

    def with_(self, component: Type[Domain], raw: str) -> "DomainBuilder":
        fields = self._take(component)
        domain = _validated(lambda: Domain(raw))
        logger.debug("Builder: domain=%s", domain)
        return DomainBuilder(replace(fields, domain=domain))


class DomainBuilder(_Stage):
    """Domain set; accepts a Category."""

    STATE = BuilderState.DOMAIN
    ACCEPTS = Category

    def with_(self, component: Type[Category], raw: str) -> "CategoryBuilder":
        fields = self._take(component)
        category = _validated(lambda: Category(raw))
        logger.debug("Builder: category=%s", category)
        return CategoryBuilder(replace(fields, category=category))


class CategoryBuilder(_Stage):
    """Category set; accepts an Account."""

    STATE = BuilderState.CATEGORY
    ACCEPTS = Account

    def with_(self, component: Type[Account], raw: str) -> "AccountBuilder":
        fields = self._take(component)
        account = _validated(lambda: Account(raw))
        logger.debug("Builder: account=%s", account)
        return AccountBuilder(replace(fields, account=account))


class AccountBuilder(_Stage):
    """
    Account set; accepts a Root.

    `raw` is the root label, generated with `strategy` (or the builder's
    default). An existing Root instance is used as-is.
    """

    STATE = BuilderState.ACCOUNT
    ACCEPTS = Root

    def with_(
        self,
        component: Type[Root],
        raw: Union[str, Root],
        strategy: Optional[RootStrategy] = None,
    ) -> "RootBuilder":
        fields = self._take(component)
        if isinstance(raw, Root):
            root = raw
        else:
            chosen = strategy or fields.strategy
            root = _validated(lambda: Root.generate(raw, chosen))
        logger.debug("Builder: root=%s (%s)", root, root.strategy)
        return RootBuilder(replace(fields, root=root))


class _PartStage(_Stage):
    ACCEPTS = Part

    def with_(self, component: Type[Part], raw: str) -> "PartBuilder":
        fields = self._take(component)
        parts = _validated(lambda: fields.parts.append(raw))
        logger.debug("Builder: part %d=%s", len(parts), parts[-1])
        return PartBuilder(replace(fields, parts=parts))

    def build(self) -> SRN:
        """Assemble the SRN from the collected components."""
        return self._build()


class RootBuilder(_PartStage):
    """Root set; accepts Parts or builds."""

    STATE = BuilderState.ROOT


class PartBuilder(_PartStage):
    """One or more Parts set; accepts more Parts (up to 10) or builds."""

    STATE = BuilderState.PART

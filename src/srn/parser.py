r"""
SRN Parser
==========
Inverse of the builder: turns canonical text back into a validated SRN.

    ern:my-app:users:tenant123:profile_01j9x5m3k8q4r7t2v6w0y1z3a5/settings
    \_/ \____/ \___/ \_______/ \_____________________________/ \______/
    scheme domain category account          root                 parts

Steps:
1. Split on the first four ':' (the fifth field may contain '/').
2. Validate domain, category and account.
3. Split the fifth field on the first '/' into root text and path tail.
4. Recover the root (opaque text, id decoded when possible).
5. Validate each '/'-separated tail segment as a Part (max 10).

Any failure raises ParseError; no partial SRN is returned.

Usage:
    from srn.parser import SRNParser, parse

    name = SRNParser("ern:my-app:users:tenant123:root/settings").parse()
    name = parse("ern:my-app:users:tenant123:root/settings")
"""
from __future__ import annotations

import logging
from typing import List

from srn.errors import ParseError, ValidationError
from srn.model.components import Account, Category, Domain, Part, PartList
from srn.model.name import DEFAULT_SCHEME, SRN, validate_scheme
from srn.model.root import Root

logger = logging.getLogger(__name__)

FIELD_COUNT = 5


class SRNParser:
    """Parses one SRN string against an expected scheme literal."""

    def __init__(self, text: str, scheme: str = DEFAULT_SCHEME):
        if not isinstance(text, str):
            raise TypeError(f"SRN must be a string, got {type(text).__name__}")
        self.text = text
        self.scheme = validate_scheme(scheme)

    def parse(self) -> SRN:
        fields = self.text.split(":", FIELD_COUNT - 1)

        if len(fields) != FIELD_COUNT:
            raise ParseError.invalid_format(
                f"expected {FIELD_COUNT} ':'-separated fields, got {len(fields)}"
            )
        if fields[0] != self.scheme:
            raise ParseError.invalid_format(
                f"expected scheme '{self.scheme}', got '{fields[0]}'"
            )

        _, domain_text, category_text, account_text, tail = fields
        root_text, slash, path_text = tail.partition("/")

        try:
            domain = Domain(domain_text)
            category = Category(category_text)
            account = Account(account_text)
            root = Root.from_string(root_text)
            parts = self._parse_parts(path_text) if slash else PartList()
        except ValidationError as e:
            logger.debug("Rejected %r: %s", self.text, e)
            raise ParseError.component_invalid(e) from e

        name = SRN(
            domain=domain,
            category=category,
            account=account,
            root=root,
            parts=parts,
            scheme=self.scheme,
        )
        logger.debug("Parsed %s (root strategy: %s)", name, root.strategy)
        return name

    @staticmethod
    def _parse_parts(path_text: str) -> PartList:
        # Validated one by one so the first bad segment is the one reported
        segments: List[Part] = [Part(segment) for segment in path_text.split("/")]
        return PartList(tuple(segments))


def parse(text: str, scheme: str = DEFAULT_SCHEME) -> SRN:
    """Parse `text` into an SRN; raises ParseError."""
    return SRNParser(text, scheme=scheme).parse()


def is_valid(text: str, scheme: str = DEFAULT_SCHEME) -> bool:
    """True if `text` parses as an SRN."""
    try:
        parse(text, scheme=scheme)
    except ParseError:
        return False
    return True

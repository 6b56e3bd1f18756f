"""
SRN CLI Command
===============
Command handlers behind the `srn` console script.

Commands:
- build: Build an SRN from components
- parse: Parse an SRN and show its components
- validate: Check whether a string is a valid SRN
- parent: Print the parent of an SRN
- compare: Order two SRNs by root creation time

Usage:
    srn build my-app users tenant123 profile settings
    srn build my-app docs tenant123 readme --strategy content_addressable
    srn parse ern:my-app:users:tenant123:profile_01j9.../settings --format json
    srn validate ern:my-app:users:tenant123:profile
    srn parent ern:my-app:users:tenant123:profile/settings/theme
    srn compare <srn-a> <srn-b>
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from srn.builder import SRNBuilder
from srn.errors import SRNError
from srn.model.components import Account, Category, Domain, Part
from srn.model.name import SRN, compare
from srn.model.root import Root, RootStrategy
from srn.parser import parse
from srn.serialization import srn_to_dict
from srn.utils.config import get_naming_config, get_output_config
from srn.utils.repo import find_config_root


class SRNCommand:
    """
    CLI command handler for SRN operations.

    Defaults (scheme, root strategy, output format) come from
    .srn/config.yaml under the config root; explicit arguments win.
    """

    def __init__(self, config_root: Optional[Path] = None):
        self.config_root = config_root or find_config_root()
        naming = get_naming_config(self.config_root)
        self.scheme: str = naming["scheme"]
        self.strategy: RootStrategy = naming["strategy"]
        self.format: str = get_output_config(self.config_root)["format"]

    def build(
        self,
        domain: str,
        category: str,
        account: str,
        root_label: str,
        parts: Optional[List[str]] = None,
        strategy: Optional[str] = None,
        scheme: Optional[str] = None,
        format: Optional[str] = None,
    ) -> int:
        """
        Build an SRN from its components.

        Returns:
            Exit code (0 for success, 1 for invalid input)
        """
        try:
            chosen = RootStrategy.from_name(strategy) if strategy else self.strategy
            stage = (
                SRNBuilder(scheme=scheme or self.scheme, strategy=chosen)
                .with_(Domain, domain)
                .with_(Category, category)
                .with_(Account, account)
                .with_(Root, root_label)
            )
            for part in parts or []:
                stage = stage.with_(Part, part)
            name = stage.build()
        except ValueError as e:  # SRNError or an unknown strategy name
            print(f"Error: {e}", file=sys.stderr)
            return 1

        self._emit(name, format)
        return 0

    def parse(self, text: str, scheme: Optional[str] = None, format: Optional[str] = None) -> int:
        """
        Parse an SRN and print its components.

        Returns:
            Exit code (0 if parsed, 1 otherwise)
        """
        try:
            name = parse(text, scheme=scheme or self.scheme)
        except SRNError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        fmt = format or self.format
        if fmt == "text":
            self._print_components(name)
        else:
            self._emit(name, fmt, mapping=True)
        return 0

    def validate(self, text: str, scheme: Optional[str] = None) -> int:
        """
        Validate an SRN string.

        Returns:
            Exit code (0 if valid, 1 if invalid)
        """
        try:
            parse(text, scheme=scheme or self.scheme)
        except SRNError as e:
            print(f"✗ Invalid SRN: {e}")
            return 1

        print("✓ Valid SRN")
        return 0

    def parent(self, text: str, scheme: Optional[str] = None) -> int:
        """
        Print the parent SRN.

        Returns:
            Exit code (0 if a parent exists, 1 for root-level or invalid SRNs)
        """
        try:
            name = parse(text, scheme=scheme or self.scheme)
        except SRNError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        parent = name.parent()
        if parent is None:
            print(f"Error: {name} has no parts, so no parent", file=sys.stderr)
            return 1

        print(parent)
        return 0

    def compare(self, left: str, right: str, scheme: Optional[str] = None) -> int:
        """
        Order two SRNs by root creation time.

        Prints "<", "=" or ">" between the two names.

        Returns:
            Exit code (0 for success, 1 if either SRN is invalid or not time-ordered)
        """
        try:
            a = parse(left, scheme=scheme or self.scheme)
            b = parse(right, scheme=scheme or self.scheme)
            result = compare(a, b)
        except SRNError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        symbol = {-1: "<", 0: "=", 1: ">"}[result]
        print(f"{a} {symbol} {b}")
        return 0

    def _emit(self, name: SRN, format: Optional[str], mapping: bool = False) -> None:
        fmt = format or self.format
        if fmt == "json":
            payload = srn_to_dict(name) if mapping else {"srn": str(name)}
            print(json.dumps(payload, indent=2))
        elif fmt == "yaml":
            payload = srn_to_dict(name) if mapping else {"srn": str(name)}
            print(yaml.dump(payload, default_flow_style=False, sort_keys=False), end="")
        else:
            print(name)

    def _print_components(self, name: SRN) -> None:
        print(f"SRN:      {name}")
        print(f"Scheme:   {name.scheme}")
        print(f"Domain:   {name.domain}")
        print(f"Category: {name.category}")
        print(f"Account:  {name.account}")
        print(f"Root:     {name.root}")
        strategy = name.root.strategy.value if name.root.strategy else "opaque"
        print(f"Strategy: {strategy}")
        if name.parts:
            print(f"Parts:    {' / '.join(name.parts.to_strings())}")
        else:
            print("Parts:    (none)")

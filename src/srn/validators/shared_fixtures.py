"""
Shared fixtures for SRN validators.

Provides ready-built names, deterministic identifier generators and
temporary config roots so individual test modules stay focused on
behaviour.
"""
import itertools
from pathlib import Path
from typing import Callable, Dict, Any, List

import pytest
import yaml

from srn.builder import SRNBuilder
from srn.model.components import Account, Category, Domain, Part
from srn.model.ids import TimeOrderedIdGenerator
from srn.model.name import SRN
from srn.model.root import Root, RootStrategy
from srn.utils.repo import CONFIG_DIR_NAME


# Canonical example used across modules
EXAMPLE_DOMAIN = "my-app"
EXAMPLE_CATEGORY = "users"
EXAMPLE_ACCOUNT = "tenant123"
EXAMPLE_ROOT_LABEL = "profile"
EXAMPLE_PATTERN = r"^ern:my-app:users:tenant123:profile_[0-9a-hjkmnp-tv-z]{26}/settings$"


@pytest.fixture
def build_srn() -> Callable[..., SRN]:
    """Factory fixture: build an SRN from the example namespace plus parts."""
    def _build(
        *parts: str,
        root_label: str = EXAMPLE_ROOT_LABEL,
        strategy: RootStrategy = RootStrategy.TIME_ORDERED,
        account: str = EXAMPLE_ACCOUNT,
    ) -> SRN:
        stage = (
            SRNBuilder(strategy=strategy)
            .with_(Domain, EXAMPLE_DOMAIN)
            .with_(Category, EXAMPLE_CATEGORY)
            .with_(Account, account)
            .with_(Root, root_label)
        )
        for part in parts:
            stage = stage.with_(Part, part)
        return stage.build()
    return _build


@pytest.fixture
def settings_srn(build_srn) -> SRN:
    """ern:my-app:users:tenant123:profile_<id>/settings"""
    return build_srn("settings")


@pytest.fixture
def fixed_clock() -> List[int]:
    """A clock frozen at one millisecond, as a mutable cell."""
    return [1_700_000_000_000]


@pytest.fixture
def frozen_generator(fixed_clock) -> TimeOrderedIdGenerator:
    """Generator whose clock only moves when a test moves fixed_clock[0]."""
    return TimeOrderedIdGenerator(clock=lambda: fixed_clock[0])


@pytest.fixture
def ticking_generator() -> TimeOrderedIdGenerator:
    """Generator whose clock advances one millisecond per call."""
    counter = itertools.count(1_700_000_000_000)
    return TimeOrderedIdGenerator(clock=lambda: next(counter))


@pytest.fixture
def config_root(tmp_path) -> Callable[[Dict[str, Any]], Path]:
    """Factory fixture: write .srn/config.yaml under tmp_path and return tmp_path."""
    def _write(config: Dict[str, Any]) -> Path:
        config_dir = tmp_path / CONFIG_DIR_NAME
        config_dir.mkdir(exist_ok=True)
        with open(config_dir / "config.yaml", "w") as f:
            yaml.safe_dump(config, f)
        return tmp_path
    return _write

"""
SRN - Structured Resource Names.

Hierarchical, validated identifiers of the form:

    ern:<domain>:<category>:<account>:<root>[/<part>...]

Usage:
    from srn import Account, Category, Domain, Part, Root, SRNBuilder, parse

    name = (
        SRNBuilder()
        .with_(Domain, "my-app")
        .with_(Category, "users")
        .with_(Account, "tenant123")
        .with_(Root, "profile")
        .with_(Part, "settings")
        .build()
    )
    assert parse(str(name)) == name
"""

__version__ = "0.1.0"

from srn.builder import SRNBuilder
from srn.errors import (
    BuilderError,
    BuilderErrorKind,
    HierarchyError,
    ParseError,
    ParseErrorKind,
    SerializationError,
    SRNError,
    ValidationError,
    ValidationErrorKind,
)
from srn.model import (
    SRN,
    Account,
    Category,
    Domain,
    Part,
    PartList,
    Root,
    RootStrategy,
    compare,
    concatenate,
    generate_content_addressable,
    generate_time_ordered,
    sort_by_creation,
)
from srn.parser import SRNParser, is_valid, parse

__all__ = [
    "__version__",
    "SRN",
    "SRNBuilder",
    "SRNParser",
    "parse",
    "is_valid",
    "Domain",
    "Category",
    "Account",
    "Part",
    "PartList",
    "Root",
    "RootStrategy",
    "generate_time_ordered",
    "generate_content_addressable",
    "compare",
    "concatenate",
    "sort_by_creation",
    "SRNError",
    "ValidationError",
    "ValidationErrorKind",
    "BuilderError",
    "BuilderErrorKind",
    "ParseError",
    "ParseErrorKind",
    "HierarchyError",
    "SerializationError",
]

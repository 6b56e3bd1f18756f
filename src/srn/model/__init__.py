"""SRN value types: components, roots and the SRN aggregate."""

from srn.model.components import (
    MAX_COMPONENT_LENGTH,
    MAX_PARTS,
    Account,
    Category,
    Component,
    Domain,
    Part,
    PartList,
)
from srn.model.name import (
    DEFAULT_ACCOUNT,
    DEFAULT_CATEGORY,
    DEFAULT_DOMAIN,
    DEFAULT_ROOT_LABEL,
    DEFAULT_SCHEME,
    SRN,
    compare,
    concatenate,
    sort_by_creation,
)
from srn.model.root import (
    Root,
    RootStrategy,
    generate_content_addressable,
    generate_time_ordered,
)

__all__ = [
    "MAX_COMPONENT_LENGTH",
    "MAX_PARTS",
    "Account",
    "Category",
    "Component",
    "Domain",
    "Part",
    "PartList",
    "DEFAULT_ACCOUNT",
    "DEFAULT_CATEGORY",
    "DEFAULT_DOMAIN",
    "DEFAULT_ROOT_LABEL",
    "DEFAULT_SCHEME",
    "SRN",
    "compare",
    "concatenate",
    "sort_by_creation",
    "Root",
    "RootStrategy",
    "generate_content_addressable",
    "generate_time_ordered",
]

"""
JSON / YAML serialization for SRNs and their components.

Every value is written as its canonical string (a PartList as a list of
strings, an SRN as its full canonical text). Loading re-validates exactly as
construction does, so invalid data raises the same ValidationError /
ParseError a constructor or the parser would.

Usage:
    from srn.serialization import to_json, from_json, to_yaml, from_yaml

    text = to_json(name)              # '"ern:my-app:users:tenant123:..."'
    same = from_json(text, SRN)
    domain = from_yaml("my-app\\n", Domain)
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Type, TypeVar, Union

import yaml

from srn.errors import SerializationError
from srn.model.components import Account, Category, Component, Domain, PartList
from srn.model.name import DEFAULT_SCHEME, SRN
from srn.model.root import Root
from srn.parser import parse

Serializable = Union[SRN, Component, Root, PartList]
S = TypeVar("S", SRN, Component, Root, PartList)

SRN_FIELDS = ("domain", "category", "account", "root", "parts")


def to_value(obj: Serializable) -> Union[str, List[str]]:
    """Plain JSON/YAML-ready value for `obj`."""
    if isinstance(obj, SRN):
        return obj.to_string()
    if isinstance(obj, PartList):
        return list(obj.to_strings())
    if isinstance(obj, (Component, Root)):
        return obj.value
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


def from_value(value: Any, cls: Type[S], scheme: str = DEFAULT_SCHEME) -> S:
    """Rebuild a `cls` instance from the output of to_value."""
    if cls is PartList:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise SerializationError(f"PartList must be a list of strings, got {value!r}")
        return PartList.from_strings(value)

    if not isinstance(value, str):
        raise SerializationError(f"{cls.__name__} must be a string, got {type(value).__name__}")

    if cls is SRN:
        return parse(value, scheme=scheme)
    if cls is Root:
        return Root.from_string(value)
    if isinstance(cls, type) and issubclass(cls, Component):
        return cls(value)
    raise TypeError(f"Cannot deserialize into {cls!r}")


def to_json(obj: Serializable, **kwargs: Any) -> str:
    return json.dumps(to_value(obj), **kwargs)


def from_json(text: str, cls: Type[S], scheme: str = DEFAULT_SCHEME) -> S:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    return from_value(value, cls, scheme=scheme)


def to_yaml(obj: Serializable) -> str:
    return yaml.safe_dump(to_value(obj), default_flow_style=False, sort_keys=False)


def from_yaml(text: str, cls: Type[S], scheme: str = DEFAULT_SCHEME) -> S:
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML: {e}") from e
    return from_value(value, cls, scheme=scheme)


def srn_to_dict(name: SRN) -> Dict[str, Any]:
    """Field-by-field mapping of an SRN."""
    return {
        "scheme": name.scheme,
        "domain": name.domain.value,
        "category": name.category.value,
        "account": name.account.value,
        "root": name.root.value,
        "parts": list(name.parts.to_strings()),
    }


def srn_from_dict(data: Dict[str, Any]) -> SRN:
    """
    Inverse of srn_to_dict.

    All of domain, category, account, root and parts are required; "scheme"
    is optional. Unknown keys are rejected.
    """
    if not isinstance(data, dict):
        raise SerializationError(f"SRN mapping must be a dict, got {type(data).__name__}")

    allowed = set(SRN_FIELDS) | {"scheme"}
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise SerializationError(f"Unknown SRN fields: {', '.join(unknown)}")
    missing = [f for f in SRN_FIELDS if f not in data]
    if missing:
        raise SerializationError(f"Missing SRN fields: {', '.join(missing)}")

    return SRN(
        domain=from_value(data["domain"], Domain),
        category=from_value(data["category"], Category),
        account=from_value(data["account"], Account),
        root=from_value(data["root"], Root),
        parts=from_value(data["parts"], PartList),
        scheme=data.get("scheme", DEFAULT_SCHEME),
    )


def srn_to_yaml_mapping(name: SRN) -> str:
    """YAML document of the field-by-field mapping."""
    return yaml.safe_dump(srn_to_dict(name), default_flow_style=False, sort_keys=False)


def srn_from_yaml_mapping(text: str) -> SRN:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML: {e}") from e
    return srn_from_dict(data)


__all__ = [
    "from_json",
    "from_value",
    "from_yaml",
    "srn_from_dict",
    "srn_from_yaml_mapping",
    "srn_to_dict",
    "srn_to_yaml_mapping",
    "to_json",
    "to_value",
    "to_yaml",
]

"""
Field-match partitioner.

A FieldMatchSpec is parsed from one argument token:

    compare(field=value;field=value)    or    field=value;field=value

A series goes to the left group iff every field is present in its
attributes with exactly the expected value. Everything else goes right.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from tsverdict.core.base import ConfigurationError

logger = logging.getLogger(__name__)

_WRAPPER_OPEN = "compare("

FieldMatchSpec = Dict[str, str]


def remove_brackets(token: str) -> str:
    """Strip an enclosing compare(...) wrapper, if present."""
    if token.startswith(_WRAPPER_OPEN) and token.endswith(")"):
        return token[len(_WRAPPER_OPEN):-1]
    return token


def parse_field_match(token: str, function: str = "fastdtw") -> FieldMatchSpec:
    """
    Parse field=value pairs into an ordered mapping.

    Trailing separators are tolerated ("env=prod;").

    Raises:
        ConfigurationError: no pairs, an empty pair, a pair without '='
            or an empty field name
    """
    pairs = remove_brackets(token.strip()).split(";")
    while pairs and not pairs[-1].strip():
        pairs.pop()
    if not pairs:
        raise ConfigurationError(function, f"no field=value pairs in '{token}'")

    spec: FieldMatchSpec = {}
    for pair in pairs:
        pair = pair.strip()
        if not pair:
            raise ConfigurationError(function, f"empty field=value pair in '{token}'")
        field_name, sep, value = pair.partition("=")
        if not sep:
            raise ConfigurationError(function, f"expected field=value, got '{pair}'")
        if not field_name:
            raise ConfigurationError(function, f"empty field name in '{pair}'")
        spec[field_name] = value
    return spec


def matches(attributes: Dict[str, str], spec: FieldMatchSpec) -> bool:
    """True if attributes satisfy every field of spec. Stops at the first miss."""
    for field_name, expected in spec.items():
        value = attributes.get(field_name)
        if value is None or value != expected:
            return False
    return True


def split_time_series(series: Sequence, spec: FieldMatchSpec) -> Tuple[List, List]:
    """
    Partition series into (left, right), preserving input order in both.

    Every input lands in exactly one group.
    """
    left, right = [], []
    for ts in series:
        if matches(ts.attributes, spec):
            left.append(ts)
        else:
            right.append(ts)

    logger.debug(f"Partitioned {len(series)} series: left={len(left)}, right={len(right)}")
    return left, right

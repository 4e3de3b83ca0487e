"""YAML loading with YAML 1.2 core-schema scalars.

PyYAML follows YAML 1.1, where ``off``/``yes`` are booleans and
``12:34:56`` is a base-60 integer. Netplan documents are written against
1.2 semantics, so the loader below only resolves ``true``/``false`` as
booleans, decimal/``0o``/``0x`` integers, plain floats, and no timestamps or
merge keys.
"""

from __future__ import annotations

import re
from typing import Any

import yaml
from yaml.constructor import ConstructorError

BOOL_TAG = "tag:yaml.org,2002:bool"
INT_TAG = "tag:yaml.org,2002:int"
FLOAT_TAG = "tag:yaml.org,2002:float"

_YAML11_ONLY_TAGS = {
    BOOL_TAG,
    INT_TAG,
    FLOAT_TAG,
    "tag:yaml.org,2002:timestamp",
    "tag:yaml.org,2002:merge",
}

# Same nesting limit serde_yaml applies
MAX_DEPTH = 128


class NetplanLoader(yaml.SafeLoader):
    """Safe loader using 1.2 core scalars.

    Rejects duplicate keys, aliases that refer back into the node being
    built, and nesting deeper than ``MAX_DEPTH``.
    """

    def __init__(self, stream):
        super().__init__(stream)
        self._depth = 0

    def construct_object(self, node, deep=False):
        # Deep construction keeps a node in recursive_objects until all of its
        # children are built, so a self-referencing alias raises ConstructorError.
        self._depth += 1
        try:
            if self._depth > MAX_DEPTH:
                raise ConstructorError(
                    None, None, "found nesting deeper than %d levels" % MAX_DEPTH, node.start_mark
                )
            return super().construct_object(node, deep=True)
        finally:
            self._depth -= 1

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            raise ConstructorError(
                None, None, "expected a mapping node, but found %s" % node.id, node.start_mark
            )
        mapping = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=deep)
            if isinstance(key, int) and not isinstance(key, bool):
                key = str(key)
            if not isinstance(key, str):
                raise ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    "found unsupported key %r" % (key,), key_node.start_mark,
                )
            if key in mapping:
                raise ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    "found duplicate key %r" % key, key_node.start_mark,
                )
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping

    def construct_yaml_int(self, node):
        value = self.construct_scalar(node)
        if value.startswith(("0o", "0x")):
            return int(value, 0)
        return int(value)


NetplanLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _YAML11_ONLY_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

NetplanLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
NetplanLoader.add_implicit_resolver(
    INT_TAG,
    re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
    list("-+0123456789"),
)
NetplanLoader.add_implicit_resolver(
    FLOAT_TAG,
    re.compile(
        r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
        r"|[-+]?\.(?:inf|Inf|INF)"
        r"|\.(?:nan|NaN|NAN))$"
    ),
    list("-+.0123456789"),
)
NetplanLoader.add_constructor(INT_TAG, NetplanLoader.construct_yaml_int)


def load_yaml(text: str) -> Any:
    """Parse ``text`` into plain dicts, lists and scalars.

    Raises ``yaml.YAMLError`` on malformed input, duplicate keys, keys that
    are neither strings nor integers, recursive aliases, or excessive nesting.
    """
    try:
        return yaml.load(text, Loader=NetplanLoader)
    except RecursionError as e:
        # the composer recurses per level before construction can check depth
        raise ConstructorError(None, None, "document nesting is too deep", None) from e

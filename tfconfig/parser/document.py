"""
Document Parser - Generic block/attribute view over parsed HCL.

``hcl2.loads`` returns nested dictionaries where blocks appear as lists
of marked dictionaries and attributes as plain values. This module converts
that output into Body/Block/Attribute objects so the extractors can
walk blocks and attributes separately, in declaration order.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional
from pathlib import Path

import hcl2
from lark.exceptions import UnexpectedInput

from ..core.errors import ParseError, OtherError

BLOCK_MARKER = "__is_block__"


@dataclass
class Attribute:
    """A ``key = expression`` pair."""
    key: str
    expr: Any


@dataclass
class Block:
    """A block with an identifier and a nested body."""
    identifier: str
    body: 'Body'


@dataclass
class Body:
    """Ordered attributes and nested blocks of a document or block."""
    attributes: List[Attribute] = field(default_factory=list)
    blocks: List[Block] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Body':
        """
        Build a body from the dictionary produced by hcl2.

        hcl2 marks every block dictionary with ``__is_block__``; a value
        that is a non-empty list of marked dictionaries is a repeated
        block. Anything else, including a list of object literals, is an
        attribute. Parser metadata keys (``__is_block__``,
        ``__start_line__`` and friends) are dropped.
        """
        body = cls()

        for key, value in data.items():
            if key.startswith('__') and key.endswith('__'):
                continue

            if _is_block_list(value):
                for item in value:
                    body.blocks.append(Block(identifier=key, body=cls.from_dict(item)))
            else:
                body.attributes.append(Attribute(key=key, expr=value))

        return body

    def attributes_named(self, key: str) -> Iterator[Attribute]:
        """Iterate over attributes with the given key."""
        return (attr for attr in self.attributes if attr.key == key)

    def blocks_named(self, identifier: str) -> Iterator[Block]:
        """Iterate over nested blocks with the given identifier."""
        return (block for block in self.blocks if block.identifier == identifier)


def _is_block_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(isinstance(item, dict) and item.get(BLOCK_MARKER) for item in value)
    )


def unquote(value: Any) -> str:
    """
    Literal textual form of an expression with double quotes removed.

    hcl2 wraps non-literal expressions as ``${...}``; the wrapper is
    dropped so ``var.x`` reads as written. Booleans use HCL spelling.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"

    text = str(value).replace('"', '')
    if text.startswith('${') and text.endswith('}') and '${' not in text[2:]:
        text = text[2:-1]
    return text


def get_object_field(obj: Dict[str, Any], name: str) -> Optional[Any]:
    """Look up an object field, matching quoted and unquoted keys."""
    for key, value in obj.items():
        if unquote(key) == name:
            return value
    return None


def parse_document(text: str, path: Optional[Path] = None) -> Body:
    """
    Parse HCL text into a Body.

    Args:
        text: File contents
        path: Source file, for error reporting

    Returns:
        Top-level body of the document

    Raises:
        ParseError: If the text is not valid HCL
        OtherError: If the parser fails for any other reason
    """
    try:
        data = hcl2.loads(text)
    except UnexpectedInput as e:
        raise ParseError(f"Syntax error in {path or '<string>'}: {e}", path=path) from e
    except Exception as e:
        raise OtherError(
            f"Failed to parse {path or '<string>'}: {type(e).__name__}: {e}", path=path
        ) from e

    return Body.from_dict(data)

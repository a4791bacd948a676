"""Token-stream serialization for expression trees.

Format (whitespace-separated, pre-order, depth-first):

    Constant <float>
    Op <operator> <left subtree...> <right subtree...>

e.g. ``1+2`` serializes to ``Op + Constant 1 Constant 2``.

Deserialization dispatches on the leading tag through a LoaderRegistry.
Each loader consumes the tokens it needs, recursing back into the
registry for child subtrees.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, TextIO

from arithtree.expression.errors import (
    MalformedStreamError,
    UnknownTagError,
)
from arithtree.expression.nodes import BinaryOpNode, ConstantNode, Node

logger = logging.getLogger(__name__)


class TokenStream:
    """Sequential reader over whitespace-separated tokens."""

    def __init__(self, source: str | TextIO | Iterable[str]) -> None:
        if isinstance(source, str):
            self._tokens = source.split()
        elif hasattr(source, "read"):
            self._tokens = source.read().split()
        else:
            self._tokens = list(source)
        self._position = 0

    @property
    def position(self) -> int:
        """Index of the next token to be read."""
        return self._position

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._tokens)

    def peek(self) -> str | None:
        """Get the next token without consuming it."""
        if self.exhausted:
            return None
        return self._tokens[self._position]

    def next_token(self) -> str:
        """Consume and return the next token.

        Raises:
            MalformedStreamError: If the stream has no tokens left
        """
        if self.exhausted:
            raise MalformedStreamError("Unexpected end of stream", self._position)
        token = self._tokens[self._position]
        self._position += 1
        return token

    def remaining(self) -> list[str]:
        """Get the unread tokens."""
        return self._tokens[self._position:]


Loader = Callable[[TokenStream, "LoaderRegistry"], Node]


class LoaderRegistry:
    """Mapping from serialized type tag to the loader for that node variant.

    Entries are installed explicitly and never removed. Reads and writes
    are guarded by a lock so trees may be loaded from several threads.
    """

    def __init__(self, loaders: dict[str, Loader] | None = None) -> None:
        self._loaders: dict[str, Loader] = {}
        self._lock = threading.Lock()
        for tag, loader in (loaders or {}).items():
            self.register(tag, loader)

    def register(self, tag: str, loader: Loader) -> None:
        """Install or overwrite the loader for tag."""
        with self._lock:
            if tag in self._loaders and self._loaders[tag] is not loader:
                logger.warning(f"Overwriting loader for tag: {tag}")
            self._loaders[tag] = loader
        logger.debug(f"Registered loader for tag {tag!r}")

    def get(self, tag: str) -> Loader | None:
        """Get the loader for tag, or None if unregistered."""
        with self._lock:
            return self._loaders.get(tag)

    @property
    def tags(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._loaders)

    def __contains__(self, tag: object) -> bool:
        with self._lock:
            return tag in self._loaders

    def load(self, stream: TokenStream) -> Node:
        """Read one subtree from stream.

        Raises:
            UnknownTagError: If the leading tag has no registered loader
            MalformedStreamError: If the stream ends early or a payload is invalid
        """
        position = stream.position
        tag = stream.next_token()
        loader = self.get(tag)
        if loader is None:
            logger.error(f"found unexpected token {tag} at position {position}")
            raise UnknownTagError(tag)
        logger.debug(f"Loading {tag!r} at position {position}")
        return loader(stream, self)


def load_constant(stream: TokenStream, registry: LoaderRegistry) -> ConstantNode:
    """Loader for ``Constant <float>``."""
    position = stream.position
    token = stream.next_token()
    try:
        value = float(token)
    except ValueError:
        raise MalformedStreamError(f"Invalid constant value: {token!r}", position) from None
    return ConstantNode(value=value)


def load_binary_op(stream: TokenStream, registry: LoaderRegistry) -> BinaryOpNode:
    """Loader for ``Op <operator> <left> <right>``."""
    position = stream.position
    operator = stream.next_token()
    if len(operator) != 1:
        raise MalformedStreamError(f"Invalid operator token: {operator!r}", position)
    left = registry.load(stream)
    right = registry.load(stream)
    return BinaryOpNode(operator=operator, left=left, right=right)


def create_default_registry() -> LoaderRegistry:
    """Create a registry holding a loader for every node variant."""
    return LoaderRegistry({
        ConstantNode.TAG: load_constant,
        BinaryOpNode.TAG: load_binary_op,
    })


DEFAULT_REGISTRY: LoaderRegistry = create_default_registry()


def register(tag: str, loader: Loader) -> None:
    """Install or overwrite a loader in the default registry."""
    DEFAULT_REGISTRY.register(tag, loader)


def load(source: TokenStream | str | TextIO, registry: LoaderRegistry | None = None) -> Node:
    """Read one tree from source, leaving any following tokens unread."""
    stream = source if isinstance(source, TokenStream) else TokenStream(source)
    return (registry or DEFAULT_REGISTRY).load(stream)


def loads(text: str, registry: LoaderRegistry | None = None) -> Node:
    """Read exactly one tree from text.

    Raises:
        MalformedStreamError: If tokens remain after the tree
    """
    stream = TokenStream(text)
    node = load(stream, registry)
    if not stream.exhausted:
        raise MalformedStreamError(
            f"Trailing tokens after expression: {' '.join(stream.remaining())}",
            stream.position,
        )
    return node


def dump(node: Node, sink: TextIO) -> None:
    """Write the serialized form of node to sink."""
    node.serialize(sink)


def dumps(node: Node) -> str:
    """Get the serialized form of node."""
    return " ".join(node.iter_tokens())

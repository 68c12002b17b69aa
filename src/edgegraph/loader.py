from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from typing import TextIO

from .graph import MAX_VERTICES, Graph, GraphInputError

INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def _tokens(stream: TextIO | Iterable[str]) -> Iterator[str]:
    try:
        for line in stream:
            yield from line.split()
    except UnicodeDecodeError as e:
        raise GraphInputError(f"Input is not valid UTF-8: {e}") from e


def _to_int(token: str) -> int | None:
    # int() also takes underscores and non-ASCII digits
    if not INT_TOKEN.fullmatch(token):
        return None
    return int(token)


def read_vertex_count(stream: TextIO | Iterable[str]) -> tuple[int, Iterator[str]]:
    """Read the leading vertex count.

    Returns the count and the token iterator positioned after it, so the
    edge pairs can be read from the same stream.
    """
    tokens = _tokens(stream)
    first = next(tokens, None)
    if first is None:
        raise GraphInputError("Missing vertex count: input is empty")
    n = _to_int(first)
    if n is None:
        raise GraphInputError(f"Invalid vertex count: {first!r}")
    return n, tokens


def read_graph(graph: Graph, stream: TextIO | Iterable[str], strict: bool = False) -> int:
    """Load ``x y`` integer pairs from *stream* into *graph*.

    Reading stops at end of input or at the first token that is not an
    integer; a trailing unpaired token is dropped.  With ``strict`` set,
    both conditions raise :class:`GraphInputError` instead.  Undirected
    graphs receive the reverse arc for every pair.

    Returns the number of pairs added.
    """
    return _read_pairs(graph, _tokens(stream), strict)


def _read_pairs(graph: Graph, tokens: Iterator[str], strict: bool) -> int:
    pairs = 0
    while True:
        a = next(tokens, None)
        if a is None:
            break
        b = next(tokens, None)
        x, y = _to_int(a), None if b is None else _to_int(b)
        if x is None or y is None:
            bad = a if x is None else b
            if strict:
                if b is None:
                    raise GraphInputError(f"Dangling token {a!r} after {pairs} edge(s)")
                raise GraphInputError(f"Malformed edge token {bad!r} after {pairs} edge(s)")
            logging.debug(f"Stopped reading edges at token {bad!r} after {pairs} edge(s)")
            break
        graph.add_edge(x, y, 0)
        if not graph.directed:
            graph.add_edge(y, x, 0)
        pairs += 1
    logging.info(f"Loaded {pairs} edge pair(s) into {graph!r}")
    return pairs


def load_graph(
    stream: TextIO | Iterable[str],
    directed: bool = True,
    max_vertices: int = MAX_VERTICES,
    strict: bool = False,
) -> Graph:
    """Build a graph from an edge-list stream whose first token is ``n``."""
    n, tokens = read_vertex_count(stream)
    graph = Graph(n, directed, max_vertices=max_vertices)
    _read_pairs(graph, tokens, strict)
    return graph

"""Reader for a subset of the Wavefront OBJ format."""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass, field
from itertools import islice
from typing import Callable, Iterable, Iterator, Sequence, TypeVar

import numpy as np

from .shapes.group import Group
from .shapes.triangle import Triangle
from .tuples import point

_log = logging.getLogger(__name__)

_T = TypeVar("_T")

_WS = r"[ \t\n\v\f\r]"
_WORD = re.compile(rf"{_WS}*([^ \t\n\v\f\r]*)")
_FLOAT = re.compile(rf"{_WS}*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT = re.compile(rf"{_WS}*([+-]?\d+)")


def _scan(pattern: re.Pattern[str], text: str, convert: Callable[[str], _T]) -> Iterator[_T]:
    """Yield successive numbers from ``text`` until one fails to read."""
    pos = 0
    while (m := pattern.match(text, pos)) is not None:
        yield convert(m.group(1))
        pos = m.end()


def fan_triangulation(indices: Sequence[int], vertices: Sequence[np.ndarray]) -> list[Triangle]:
    """Split a convex polygon given by 1-based vertex indices into triangles."""
    if len(indices) < 3:
        raise ValueError(f"not enough indices for one triangle: {len(indices)}")

    def vertex(index: int) -> np.ndarray:
        i = index - 1
        if not 0 <= i < len(vertices):
            raise ValueError(f"vertex index {index} out of range 1..{len(vertices)}")
        return vertices[i]

    first = vertex(indices[0])
    return [Triangle(first, vertex(a), vertex(b)) for a, b in zip(indices[1:], indices[2:])]


def parse_vertex(text: str) -> np.ndarray | None:
    """Read three coordinates from ``text``; None if fewer can be read."""
    values = list(islice(_scan(_FLOAT, text, float), 3))
    if len(values) < 3:
        return None
    return point(*values)


@dataclass
class ParseResult:
    """Vertices and triangles read from an OBJ stream."""

    num_lines_skipped: int = 0
    vertices: list[np.ndarray] = field(default_factory=list)
    default_group: Group = field(default_factory=Group)
    named_groups: dict[str, Group] = field(default_factory=dict)

    def get_group(self, name: str) -> Group | None:
        return self.named_groups.get(name)

    def to_group(self) -> Group:
        """One group holding the default group's shapes and every named group."""
        group = _clone_group(self.default_group)
        for named in self.named_groups.values():
            group.add_child(_clone_group(named))
        return group


def _clone_group(source: Group) -> Group:
    clone = copy.copy(source)
    clone.shapes = []
    clone.add_children(source.shapes)
    return clone


def parse(stream: Iterable[str]) -> ParseResult:
    """Parse OBJ lines; unknown lines are counted, malformed ones are logged."""
    result = ParseResult()
    current = result.default_group
    group_name = ""

    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line:
            continue

        m = _WORD.match(line)
        header = m.group(1)
        rest = line[m.end():]

        if header == "g":
            name = _WORD.match(rest).group(1)
            if name:
                group_name = name
            if not group_name:
                _log.warning("Failed to parse group name: %s", line)
            else:
                if group_name not in result.named_groups:
                    result.named_groups[group_name] = Group()
                current = result.named_groups[group_name]
        elif header == "v":
            p = parse_vertex(rest)
            if p is None:
                _log.warning("Failed to parse vertex: %s", line)
            else:
                result.vertices.append(p)
        elif header == "f":
            indices = list(_scan(_INT, rest, int))
            if len(indices) < 3:
                _log.warning("Failed to parse line for face: %s", line)
            else:
                current.add_children(fan_triangulation(indices, result.vertices))
        else:
            result.num_lines_skipped += 1

    return result
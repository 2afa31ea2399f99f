"""Route file loaders.

Two input formats produce the same `RouteData`:

Edge-list files, a simplified DOT-like notation::

    graph TrainRoutes {
    Albany
    Chicago
    Albany -- Chicago [weight=15]
    }

Lines holding ``{`` or ``}`` and blank lines are ignored, lines containing the
edge operator are edges, and every other line names a vertex.

YAML files, validated against ``railgraph/schemas/routes.json``::

    stations: [Albany, Chicago]
    routes:
      - {source: Albany, target: Chicago, weight: 15}
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml

from railgraph.config import ROUTE_CONFIG, RouteFinderConfig
from railgraph.graph.base import is_finite_weight
from railgraph.logging import get_logger

logger = get_logger(__name__)

Weight = Union[int, float]

_RECOGNIZED_KEYS = {"stations", "routes"}


@dataclass(frozen=True)
class RouteEdge:
    """A directed ``source -> target`` connection with its weight."""

    source: str
    target: str
    weight: Weight

    def __str__(self) -> str:
        return f"{self.source} {self.target} {self.weight}"


@dataclass
class RouteData:
    """Parsed route file: vertex labels and edge triples, both in file order."""

    vertices: List[str] = field(default_factory=list)
    edges: List[RouteEdge] = field(default_factory=list)

    def triples(self) -> List[tuple]:
        """Return edges as plain ``(source, target, weight)`` tuples."""
        return [(e.source, e.target, e.weight) for e in self.edges]


def _clean_label(raw: str) -> str:
    label = raw.strip().rstrip(";").strip()
    if len(label) >= 2 and label[0] == label[-1] and label[0] in "\"'":
        label = label[1:-1].strip()
    return label


def _parse_weight(raw: str) -> Weight:
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def _edge_pattern(config: RouteFinderConfig) -> re.Pattern:
    return re.compile(
        r"^(?P<source>.+?)\s*"
        + re.escape(config.edge_operator)
        + r"\s*(?P<target>[^\[]+?)\s*"
        + r"\[\s*(?P<key>\w+)\s*=\s*(?P<value>[^\]]+?)\s*\]\s*;?$"
    )


def parse_edge_list(text: str, config: Optional[RouteFinderConfig] = None) -> RouteData:
    """Parse edge-list text into `RouteData`.

    Args:
        text: File contents.
        config: Loader settings; defaults to ``ROUTE_CONFIG``.

    Returns:
        Vertices and edges in the order they appear.

    Raises:
        ValueError: If an edge line is malformed or its weight is not a finite
            number.
    """
    config = config or ROUTE_CONFIG
    pattern = _edge_pattern(config)
    data = RouteData()

    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or "{" in line or "}" in line:
            continue
        if config.edge_operator not in line:
            label = _clean_label(line)
            if label:
                data.vertices.append(label)
            continue

        match = pattern.match(line)
        if match is None:
            raise ValueError(f"Line {lineno}: malformed edge definition: {line!r}")
        if match.group("key") != config.weight_key:
            raise ValueError(
                f"Line {lineno}: expected '{config.weight_key}' attribute, "
                f"got '{match.group('key')}'"
            )
        try:
            weight = _parse_weight(match.group("value"))
        except ValueError:
            raise ValueError(
                f"Line {lineno}: weight must be numeric, got {match.group('value')!r}"
            ) from None
        if not is_finite_weight(weight):
            raise ValueError(
                f"Line {lineno}: weight must be finite, got {match.group('value')!r}"
            )
        data.edges.append(
            RouteEdge(
                source=_clean_label(match.group("source")),
                target=_clean_label(match.group("target")),
                weight=weight,
            )
        )

    return data


def load_edge_list(
    path: Union[str, Path], config: Optional[RouteFinderConfig] = None
) -> RouteData:
    """Read and parse an edge-list route file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file contains a malformed edge line.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"Error: File not found: {path}") from None
    data = parse_edge_list(text, config)
    logger.info(
        "Loaded %d stations and %d routes from %s",
        len(data.vertices),
        len(data.edges),
        path,
    )
    return data


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("railgraph.schemas")
        .joinpath("routes.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_routes_yaml(yaml_str: str) -> RouteData:
    """Load and validate a YAML route document.

    Raises:
        ValueError: If the document is not a mapping, has unknown top-level keys,
            or holds a NaN or infinite weight.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    doc = yaml.safe_load(yaml_str)
    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(doc.keys()) - _RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in route file: {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(_RECOGNIZED_KEYS)}"
        )

    jsonschema.validate(doc, _load_schema())

    # JSON schema "minimum" lets .nan and .inf through
    for idx, route in enumerate(doc.get("routes", [])):
        if not is_finite_weight(route["weight"]):
            raise ValueError(
                f"routes[{idx}]: weight must be finite, got {route['weight']!r}"
            )

    return RouteData(
        vertices=[name.strip() for name in doc.get("stations", [])],
        edges=[
            RouteEdge(
                source=route["source"].strip(),
                target=route["target"].strip(),
                weight=route["weight"],
            )
            for route in doc.get("routes", [])
        ],
    )


def load_routes(
    path: Union[str, Path], config: Optional[RouteFinderConfig] = None
) -> RouteData:
    """Load a route file, choosing the format from its suffix.

    ``.yaml`` and ``.yml`` files are read as YAML; anything else as an edge list.
    """
    path = Path(path)
    if path.suffix.lower() not in (".yaml", ".yml"):
        return load_edge_list(path, config)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"Error: File not found: {path}") from None
    data = load_routes_yaml(text)
    logger.info(
        "Loaded %d stations and %d routes from %s",
        len(data.vertices),
        len(data.edges),
        path,
    )
    return data

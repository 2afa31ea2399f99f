"""Route finder facade.

`RouteFinder` loads route data into a graph once and answers station, route
and network-cost queries against it. It is the layer the CLI talks to.
"""

from __future__ import annotations

from pathlib import Path as FilePath
from typing import Callable, List, Optional, Union

from railgraph.algorithms.mst import mst_cost
from railgraph.algorithms.path import Path
from railgraph.algorithms.spf import dijkstra_path
from railgraph.config import RouteFinderConfig
from railgraph.graph.base import GraphADT
from railgraph.graph.weighted_digraph import WeightedDiGraph
from railgraph.io import RouteData, load_routes
from railgraph.logging import get_logger

logger = get_logger(__name__)


class RouteFinder:
    """Shortest-route queries over a loaded rail network.

    Attributes:
        origin: Default origin station for route queries.
        destination: Default destination station for route queries.
        graph: The populated graph.
    """

    def __init__(
        self,
        data: RouteData,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        graph_factory: Callable[[], GraphADT] = WeightedDiGraph,
    ) -> None:
        """Build the graph from ``data``.

        Args:
            data: Stations and routes, typically from `load_routes`.
            origin: Optional default origin.
            destination: Optional default destination.
            graph_factory: Zero-argument callable returning an empty graph.

        Raises:
            InvalidArgumentError: If a route references an undeclared station
                or has a negative weight.
        """
        self.origin = origin
        self.destination = destination
        self._stations: List[str] = list(data.vertices)
        self.graph: GraphADT = graph_factory()

        for station in self._stations:
            self.graph.insert_vertex(station)
        for edge in data.edges:
            self.graph.insert_edge(edge.source, edge.target, edge.weight)

        logger.debug(
            "Built route graph: %d stations, %d directed routes",
            self.graph.vertex_count(),
            self.graph.edge_count(),
        )

    @classmethod
    def from_file(
        cls,
        path: Union[str, FilePath],
        config: Optional[RouteFinderConfig] = None,
        **kwargs,
    ) -> RouteFinder:
        """Load ``path`` with `load_routes` and build a finder from it."""
        return cls(load_routes(path, config), **kwargs)

    def stations(self) -> List[str]:
        """Return station names in the order they were declared."""
        return list(self._stations)

    def is_station(self, name: Optional[str]) -> bool:
        """Return True if ``name`` is a known station."""
        return name is not None and self.graph.contains_vertex(name)

    def _endpoints(self, origin: Optional[str], destination: Optional[str]):
        origin = origin if origin is not None else self.origin
        destination = destination if destination is not None else self.destination
        if origin is None:
            raise ValueError("No origin station set.")
        if destination is None:
            raise ValueError("No destination station set.")
        return origin, destination

    def route(
        self, origin: Optional[str] = None, destination: Optional[str] = None
    ) -> Path:
        """Return the shortest `Path` between two stations.

        Arguments default to the finder's ``origin`` and ``destination``.

        Raises:
            ValueError: If an endpoint is neither given nor set.
            NotFoundError: If a station is unknown or unreachable.
        """
        origin, destination = self._endpoints(origin, destination)
        path = dijkstra_path(self.graph, origin, destination)
        logger.debug("Route %s -> %s: %s", origin, destination, path)
        return path

    def shortest_route(
        self, origin: Optional[str] = None, destination: Optional[str] = None
    ) -> List[str]:
        """Return the station names along the shortest route."""
        return list(self.route(origin, destination).nodes)

    def route_length(
        self, origin: Optional[str] = None, destination: Optional[str] = None
    ):
        """Return the total weight of the shortest route."""
        return self.route(origin, destination).cost

    def network_cost(self, seed: str):
        """Return the minimum spanning tree cost of the network grown from ``seed``."""
        return mst_cost(self.graph, seed)

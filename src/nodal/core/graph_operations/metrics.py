"""Graph metrics calculation functionality."""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..exceptions import JoinedError
from ..models import Neighborhood
from ..types import DegreeCounter, GraphProtocol

logger = logging.getLogger(__name__)


def undirected_degree(neighborhood: Neighborhood) -> int:
    return neighborhood.undirected_degree


def incoming_degree(neighborhood: Neighborhood) -> int:
    return neighborhood.incoming_degree


def outgoing_degree(neighborhood: Neighborhood) -> int:
    return neighborhood.outgoing_degree


def total_degree(neighborhood: Neighborhood) -> int:
    """All links touching the node, whatever their direction."""
    return (
        neighborhood.incoming_degree
        + neighborhood.outgoing_degree
        + neighborhood.undirected_degree
    )


@dataclass
class NetworkStatistics:
    """
    Container for the basic statistics of a network.

    Attributes:
        degree_distribution (Dict[int, float]): Share of the nodes per degree value
        nodes_size (int): Number of nodes
        directed_size (int): Number of directed links
        undirected_size (int): Number of undirected links
    """

    degree_distribution: Dict[int, float] = field(default_factory=dict)
    nodes_size: int = 0
    directed_size: int = 0
    undirected_size: int = 0

    @property
    def average_directed_degree(self) -> float:
        """Directed links per node, -1 for a graph with no node."""
        if self.nodes_size == 0:
            return -1.0
        return self.directed_size / self.nodes_size

    @property
    def average_undirected_degree(self) -> float:
        """Undirected degree per node, -1 for a graph with no node."""
        if self.nodes_size == 0:
            return -1.0
        return 2.0 * self.undirected_size / self.nodes_size

    @property
    def directed_density(self) -> float:
        """Directed links over their possible maximum, 0 under two nodes."""
        if self.nodes_size < 2:
            return 0.0
        return self.directed_size / (self.nodes_size * (self.nodes_size - 1.0))

    @property
    def undirected_density(self) -> float:
        """Undirected links over their possible maximum, 0 under two nodes."""
        if self.nodes_size < 2:
            return 0.0
        return 2.0 * self.undirected_size / (self.nodes_size * (self.nodes_size - 1.0))


@dataclass
class StatisticsResult:
    """Statistics and the element level failures met computing them."""

    statistics: NetworkStatistics
    errors: Optional[JoinedError] = None


class MetricsCalculator:
    """
    Calculates degree based metrics of a graph.

    Only degree counters of neighborhoods are read, no link is loaded, so a
    pass costs one neighbors() call per node.
    """

    @staticmethod
    def calculate_network_statistics(
        graph: GraphProtocol, counter: DegreeCounter = undirected_degree
    ) -> StatisticsResult:
        """
        Calculate the basic statistics of a graph in a single pass.

        The degree distribution is built on counter, so that the same pass
        gives the undirected, incoming, outgoing or any other degree
        distribution. Nodes whose neighborhood fails to load are skipped and
        reported in the result errors.

        Args:
            graph: Graph to analyze
            counter: Degree value of a neighborhood, used for the distribution

        Returns:
            StatisticsResult: The statistics, and errors if some nodes failed
        """
        errors: Optional[JoinedError] = None
        counts: Dict[int, int] = defaultdict(int)
        statistics = NetworkStatistics()

        nodes = graph.all_nodes()
        for node in nodes:
            try:
                neighborhood = graph.neighbors(node)
            except Exception as e:
                errors = JoinedError.join(errors, e)
                continue
            if neighborhood is None:
                continue

            counts[counter(neighborhood)] += 1
            statistics.nodes_size += 1
            statistics.directed_size += neighborhood.outgoing_degree
            statistics.undirected_size += neighborhood.undirected_degree

        errors = JoinedError.join(errors, nodes.pop_errors())

        # undirected links were counted by both extremities
        statistics.undirected_size //= 2
        statistics.degree_distribution = {
            degree: count / statistics.nodes_size for degree, count in counts.items()
        }

        if errors is not None:
            logger.warning(f"Statistics skipped {len(errors)} failing nodes")
        logger.debug(
            f"Statistics over {statistics.nodes_size} nodes: "
            f"{statistics.directed_size} directed, {statistics.undirected_size} undirected"
        )
        return StatisticsResult(statistics=statistics, errors=errors)

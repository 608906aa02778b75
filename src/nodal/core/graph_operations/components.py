"""Graph component analysis functionality."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..exceptions import JoinedError
from ..iterators import Cursor, DynamicCursor, EmptyCursor, MapFilterCursor
from ..models import Neighborhood, Node
from ..sets import AbstractSet, ListSet, SetBuilder
from ..types import GraphProtocol

logger = logging.getLogger(__name__)

CursorBuilder = Callable[[], DynamicCursor]


def _same_node(a: Node, b: Node) -> bool:
    return a.same_node(b)


@dataclass
class ComponentResult:
    """
    Container for component analysis results.

    Attributes:
        sizes (Dict[int, int]): Size of each component, by component number
        errors (Optional[JoinedError]): Element level failures, None if none
    """

    sizes: Dict[int, int] = field(default_factory=dict)
    errors: Optional[JoinedError] = None

    def component_count(self) -> int:
        return len(self.sizes)

    def sorted_sizes(self) -> List[int]:
        """Component sizes, smallest first."""
        return sorted(self.sizes.values())


class ComponentAnalysis:
    """
    Analyzes connected components in a graph.

    Links are followed both ways, so components are the weakly connected
    components of directed graphs. Nodes are only compared with same_node,
    never hashed.
    """

    @staticmethod
    def connected_components_size(
        graph: GraphProtocol,
        set_builder: Optional[SetBuilder] = None,
        cursor_builder: Optional[CursorBuilder] = None,
    ) -> ComponentResult:
        """
        Find the size of each connected component with breadth first walks.

        Every node is first marked as pending. Then, as long as a pending node
        remains, a walk starts from it and unmarks each node it dequeues.
        Nodes only reachable through incoming directed links may have been
        counted in an earlier component: when the walk meets one, that earlier
        component is merged into the current one.

        Args:
            graph: Graph to analyze
            set_builder: Builds the sets marking nodes, ListSet by default
            cursor_builder: Builds the work queue of each walk, DynamicCursor by default

        Returns:
            ComponentResult: Sizes by component number (0 to count - 1) and
                the failures met while loading neighborhoods
        """
        build_set = set_builder or ListSet
        build_queue = cursor_builder or DynamicCursor
        equality = _same_node

        errors: Optional[JoinedError] = None
        pending: AbstractSet[Node] = build_set(equality)
        nodes = graph.all_nodes()
        for node in nodes:
            pending.add(node)
        errors = JoinedError.join(errors, nodes.pop_errors())

        members: Dict[int, AbstractSet[Node]] = {}
        component = 0
        while not pending.is_empty():
            current_members = build_set(equality)
            members[component] = current_members

            queue = build_queue()
            queue.add_last_value(pending.peek())
            while queue.advance():
                current = queue.current()
                # a node may be queued more than once before it is dequeued
                if not pending.has(current):
                    continue

                pending.remove(current)
                current_members.add(current)

                try:
                    neighborhood = graph.neighbors(current)
                except Exception as e:
                    errors = JoinedError.join(errors, e)
                    continue
                if neighborhood is None:
                    continue

                links = neighborhood.links()
                for link in links:
                    other = link.opposite(current)
                    if pending.has(other):
                        queue.add_last_value(other)
                    elif not current_members.has(other):
                        ComponentAnalysis._merge_into(members, component, other)
                errors = JoinedError.join(errors, links.pop_errors())

            component += 1

        if errors is not None:
            logger.warning(f"Component analysis met {len(errors)} errors")

        sizes = {
            number: component_members.size()
            for number, component_members in enumerate(members.values())
        }
        return ComponentResult(sizes=sizes, errors=errors)

    @staticmethod
    def destination_neighbors(
        origin: Node, graph: GraphProtocol
    ) -> Optional[Cursor[Neighborhood]]:
        """
        Neighborhoods of the nodes one link away from origin.

        For each link of origin, the neighborhood of its other extremity is
        returned, unless that neighborhood is isolated.

        Returns:
            Optional[Cursor[Neighborhood]]: None if origin is not in the graph,
                an empty cursor if origin is isolated
        """
        neighborhood = graph.neighbors(origin)
        if neighborhood is None:
            return None
        if neighborhood.is_isolated():
            return EmptyCursor()

        return MapFilterCursor(
            neighborhood.links(),
            lambda link: graph.neighbors(link.opposite(origin)),
            lambda other: other is not None and not other.is_isolated(),
        )

    @staticmethod
    def _merge_into(members: Dict[int, AbstractSet[Node]], component: int, node: Node) -> None:
        """Move the earlier component holding node into component."""
        target = members[component]
        for number, other_members in list(members.items()):
            if number == component or not other_members.has(node):
                continue
            for other in other_members.to_cursor():
                target.add(other)
            del members[number]
            logger.debug(f"Merged component {number} into component {component}")
            return

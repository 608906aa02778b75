"""Graph export operations.

This module writes graphs as GEXF files, the XML format read by Gephi and
most graph visualization tools:
- Nodes are numbered in the order the graph returns them
- Node attributes are discovered node by node, declared as strings
- Edges are serialized by a caller provided callback, on node numbers
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union
from xml.sax.saxutils import quoteattr

from ..exceptions import ExportError, GraphOperationError, JoinedError
from ..models import Link, Node
from ..types import GraphProtocol

logger = logging.getLogger(__name__)

NodeExporter = Callable[[Node], Tuple[str, Optional[Dict[str, str]]]]
LinkSerializer = Callable[[int, int, Link], str]

GEXF_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<gexf xmlns="http://gexf.net/1.2" version="1.2">
<graph mode="static">
<attributes class="node">
{attributes}
</attributes>
<nodes>
{nodes}
</nodes>
<edges>
{edges}
</edges>
</graph>
</gexf>
"""


def blank_node_exporter(node: Node) -> Tuple[str, Optional[Dict[str, str]]]:
    """Export a node with no label and no attribute."""
    return "", None


def basic_link_serializer(source: int, destination: int, link: Link) -> str:
    """Serialize a link as a GEXF edge with no more information than its direction."""
    if link.is_directed():
        return f'<edge source="{source}" target="{destination}" type="directed"/>'
    return f'<edge source="{source}" target="{destination}" type="undirected"/>'


def serialize_attribute(index: int, title: str) -> str:
    return f'<attribute id="{index}" title={quoteattr(title)} type="string"/>'


def serialize_node(index: int, label: str, values: Dict[int, str]) -> str:
    """Return the GEXF element of a node, values are attribute values by attribute index."""
    result = f'<node id="{index}"'
    if label:
        result += f" label={quoteattr(label)}"
    if not values:
        return result + "/>"

    lines = [result + ">", "<attvalues>"]
    for attribute_index in sorted(values):
        lines.append(f'<attvalue for="{attribute_index}" value={quoteattr(values[attribute_index])}/>')
    lines.extend(["</attvalues>", "</node>"])
    return "\n".join(lines)


class GexfExporter:
    """
    Exports graphs to GEXF.

    Only all_nodes() and neighbors() are used, so any graph implementation
    can be exported. Failures on single nodes or links do not stop the
    export pass, but if any happened no content is produced and an
    ExportError holding all of them is raised.

    Attributes:
        node_exporter (NodeExporter): Gives the label and attributes of a node
        link_serializer (LinkSerializer): Gives the GEXF edge of a link, from
            the numbers of its extremities
    """

    def __init__(
        self,
        node_exporter: NodeExporter = blank_node_exporter,
        link_serializer: LinkSerializer = basic_link_serializer,
    ):
        self.node_exporter = node_exporter
        self.link_serializer = link_serializer

    def to_string(self, graph: GraphProtocol) -> str:
        """
        Build the GEXF content of a graph.

        Raises:
            ExportError: If any node or link failed to export
        """
        errors: Optional[JoinedError] = None
        nodes: List[Node] = []
        node_values: List[str] = []
        attribute_indexes: Dict[str, int] = {}

        cursor = graph.all_nodes()
        for node in cursor:
            try:
                label, properties = self.node_exporter(node)
            except Exception as e:
                errors = JoinedError.join(errors, e)
                continue

            values: Dict[int, str] = {}
            for key, value in (properties or {}).items():
                index = attribute_indexes.setdefault(key, len(attribute_indexes))
                values[index] = value

            node_values.append(serialize_node(len(nodes), label, values))
            nodes.append(node)
        errors = JoinedError.join(errors, cursor.pop_errors())

        edge_values: List[str] = []
        for node in nodes:
            try:
                edge_values.extend(self._serialize_links(graph, node, nodes))
            except Exception as e:
                errors = JoinedError.join(errors, e)

        if errors is not None:
            logger.error(f"GEXF export failed with {len(errors)} errors")
            raise ExportError(f"export failed: {errors}", cause=errors)

        attribute_values = [
            serialize_attribute(index, title) for title, index in attribute_indexes.items()
        ]
        return GEXF_TEMPLATE.format(
            attributes="\n".join(attribute_values),
            nodes="\n".join(node_values),
            edges="\n".join(edge_values),
        )

    def export(self, path: Union[str, Path], graph: GraphProtocol) -> None:
        """
        Write graph as a GEXF file at path, replacing any existing file.

        Raises:
            ExportError: If any node or link failed to export, or the file
                could not be written
        """
        content = self.to_string(graph)
        try:
            Path(path).write_text(content, encoding="utf-8")
        except OSError as e:
            raise ExportError(f"cannot write {path}: {e}", cause=JoinedError([e])) from e
        logger.debug(f"Exported graph to {path}")

    def _serialize_links(self, graph: GraphProtocol, node: Node, nodes: List[Node]) -> List[str]:
        """Serialize the links of node, each undirected link from its source only."""
        neighborhood = graph.neighbors(node)
        if neighborhood is None:
            raise GraphOperationError("node disappeared during export")

        result: List[str] = []
        links = neighborhood.links()
        for link in links:
            # undirected links are seen from both extremities
            if not link.is_directed() and not link.source.same_node(node):
                continue

            source = _position(nodes, link.source)
            destination = _position(nodes, link.destination)
            if source < 0 or destination < 0:
                raise GraphOperationError("link extremity not in exported nodes")
            result.append(self.link_serializer(source, destination, link))

        failures = links.pop_errors()
        if failures is not None:
            raise failures
        return result


def _position(nodes: List[Node], node: Node) -> int:
    for index, current in enumerate(nodes):
        if node.same_node(current):
            return index
    return -1

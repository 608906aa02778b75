"""Command Line Interface for the graph engine.

This module provides a CLI to generate random graphs, print their basic
statistics and connected components, and optionally export them as GEXF.

The CLI supports the following command:
    - generate: Build a graph with one of the models gnp, ba or complete

Generation parameters are given either as options or as a JSON document,
itself given as a direct string or as a file path prefixed with '@'. JSON
documents are validated against GENERATOR_SCHEMA.

Example Usage:
    python -m nodal generate gnp --size 50 --probability 0.1 --seed 42
    python -m nodal generate ba --initial-size 10 --size 200 --output ba.gexf
    python -m nodal generate --config @data/generator.json
"""

import argparse
import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import Callable, List, Optional

from .core.exceptions import ExportError, ValidationError
from .core.graph import MapGraph
from .core.graph_operations.components import ComponentAnalysis
from .core.graph_operations.metrics import MetricsCalculator, outgoing_degree, undirected_degree
from .core.graph_operations.randoms import RandomGraphGenerator, generate_complete_undirected_graph
from .core.graph_operations.serialization import GexfExporter
from .core.models import IdNode, UndirectedSimpleLink, ValuedLink
from .utils.validation import RangeRule, SchemaValidator, validate_dataclass

logger = logging.getLogger(__name__)

MODELS = ("gnp", "ba", "complete")
DEFAULT_PROBABILITY = 0.5


@validate_dataclass
@dataclass
class GeneratorConfig:
    """
    Parameters of a graph generation.

    Attributes:
        model (str): One of gnp, ba, complete
        size (int): Number of nodes of the result
        initial_size (int): Size of the complete core, ba only
        probability (float): Link probability, gnp only
        directed (bool): Directed links, gnp only
        seed (Optional[int]): Seed of the random generator
        output (Optional[str]): GEXF file to write, if any
    """

    model: str
    size: int
    initial_size: int = 1
    probability: float = DEFAULT_PROBABILITY
    directed: bool = False
    seed: Optional[int] = None
    output: Optional[str] = None

    def __post_init__(self):
        """Validate values after initialization."""
        if self.model not in MODELS:
            raise ValidationError(f"unknown model {self.model}, expected one of {MODELS}")
        if not RangeRule(min_value=0).validate(self.size):
            raise ValidationError(f"size must be a non negative integer, got {self.size}")
        if not RangeRule(min_value=0.0, max_value=1.0).validate(self.probability):
            raise ValidationError(f"probability must be in [0, 1], got {self.probability}")
        if self.directed and self.model != "gnp":
            raise ValidationError(f"model {self.model} only builds undirected graphs")


def parse_json_input(json_str: str) -> dict:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
                       Relative file paths are resolved from the current directory.

    Returns:
        dict: Parsed JSON data.

    Raises:
        ValidationError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValidationError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON input: {e}")


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build the generation parameters from a JSON document or from options.

    Raises:
        ValidationError: If the parameters are invalid.
    """
    if args.config:
        document = parse_json_input(args.config)
        result = SchemaValidator().validate_config(document)
        if not result.is_valid:
            raise ValidationError("; ".join(result.errors))
        for warning in result.warnings:
            logger.warning(warning)
        return GeneratorConfig(**document)

    if args.model is None or args.size is None:
        raise ValidationError("a model and a size are required without --config")

    return GeneratorConfig(
        model=args.model,
        size=args.size,
        initial_size=args.initial_size,
        probability=args.probability,
        directed=args.directed,
        seed=args.seed,
        output=args.output,
    )


def generate_graph(config: GeneratorConfig) -> MapGraph:
    """Generate the graph described by config, nodes get random ids.

    Raises:
        InvalidInputError: If the generator rejects the parameters.
    """
    generator = RandomGraphGenerator(seed=config.seed)
    if config.model == "gnp":
        if config.directed:
            return generator.directed_gnp(
                config.size,
                config.probability,
                IdNode.random,
                lambda source, destination: ValuedLink.directed_link(source, destination, None),
            )
        return generator.undirected_gnp(
            config.size, config.probability, IdNode.random, UndirectedSimpleLink
        )

    if config.model == "ba":
        return generator.undirected_barabasi_albert(
            config.initial_size, config.size, IdNode.random, UndirectedSimpleLink
        )

    return generate_complete_undirected_graph(config.size, IdNode.random, UndirectedSimpleLink)


def report(graph: MapGraph, config: GeneratorConfig, write: Callable[[str], None] = print) -> None:
    """Write the statistics and component sizes of graph."""
    counter = outgoing_degree if config.directed else undirected_degree
    statistics = MetricsCalculator.calculate_network_statistics(graph, counter).statistics

    write(f"Model: {config.model}")
    write(f"Nodes: {statistics.nodes_size}")
    if config.directed:
        write(f"Directed links: {statistics.directed_size}")
        write(f"Average degree: {statistics.average_directed_degree:.4f}")
        write(f"Density: {statistics.directed_density:.4f}")
    else:
        write(f"Undirected links: {statistics.undirected_size}")
        write(f"Average degree: {statistics.average_undirected_degree:.4f}")
        write(f"Density: {statistics.undirected_density:.4f}")

    write("Degree distribution:")
    for degree in sorted(statistics.degree_distribution):
        write(f"- {degree}: {statistics.degree_distribution[degree]:.4f}")

    components = ComponentAnalysis.connected_components_size(graph)
    sizes = sorted(components.sizes.values(), reverse=True)
    write(f"Components: {len(sizes)}")
    write(f"Component sizes: {sizes}")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Random graph generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    generate = subparsers.add_parser("generate", help="Generate a random graph")
    generate.add_argument("model", nargs="?", choices=MODELS, help="Random graph model")
    generate.add_argument("--size", type=int, help="Number of nodes")
    generate.add_argument(
        "--initial-size", type=int, default=1, help="Size of the complete core (ba)"
    )
    generate.add_argument(
        "--probability",
        type=float,
        default=DEFAULT_PROBABILITY,
        help="Link probability (gnp)",
    )
    generate.add_argument("--directed", action="store_true", help="Directed links (gnp)")
    generate.add_argument("--seed", type=int, help="Seed of the random generator")
    generate.add_argument("--output", help="GEXF file to write")
    generate.add_argument("--config", help="JSON string or @filename with all the parameters")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Exit code, 0 on success.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = build_config(args)
        logger.debug(f"Generating with {asdict(config)}")
        graph = generate_graph(config)
        report(graph, config)
        if config.output:
            GexfExporter(lambda node: (node.id, None)).export(config.output, graph)
            print(f"Graph written to {config.output}")
    except ValidationError as e:
        logger.error(str(e))
        return 2
    except ExportError as e:
        logger.error(str(e))
        return 1

    return 0

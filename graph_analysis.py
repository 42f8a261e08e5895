import argparse
import json
import logging
import os
import subprocess
import sys

from graph_metrics import GraphMetrics, ParseError, analyze_graph, read_edge_list, write_dot
from graph_metrics.graph_store import GraphStore
from graph_metrics.plotting import plot_degree_distribution, plot_graph

logger = logging.getLogger("graph_analysis")

PLOT_MODES = ('graph', 'degree')


class GraphvizNotFoundError(Exception):
    """The external Graphviz `dot` executable could not be started."""


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the graph metrics program.

    Returns:
        argparse.Namespace: Parsed arguments containing:
            - graph_files: One or more edge-list files to analyze
            - workers: Thread count for diameter/clustering (default: executor default)
            - distribution: Boolean flag to print the degree distribution
            - json: Boolean flag to print metrics as JSON instead of text
            - dot: Path to write the Graphviz DOT serialization
            - render: Path of a PNG to render with the external Graphviz `dot` tool
            - plot: Plot mode 'graph' or 'degree'
            - log_level: Logging level name (default WARNING)
    """
    parser = argparse.ArgumentParser(
        prog='graph-analysis',
        description='Structural statistics for undirected graphs stored as edge lists.',
        usage='%(prog)s graph_file [graph_file ...] [OPTIONS]'
    )

    parser.add_argument('graph_files',
                        nargs='+',
                        metavar='graph_file',
                        help='Edge-list file(s): one "source target" pair per line, '
                             '%% starts a comment.')

    parser.add_argument('--workers',
                        type=int,
                        metavar='N',
                        help='Worker threads for diameter and clustering (1 = no threads).')

    parser.add_argument('--distribution',
                        action='store_true',
                        help='Also print the degree distribution.')

    parser.add_argument('--json',
                        action='store_true',
                        help='Print metrics as JSON instead of text.')

    parser.add_argument('--dot',
                        type=str,
                        metavar='file.dot',
                        help='Write the graph in Graphviz DOT format.')

    parser.add_argument('--render',
                        type=str,
                        metavar='file.png',
                        help='Render the graph to PNG with the external Graphviz "dot" tool.')

    parser.add_argument('--plot',
                        choices=PLOT_MODES,
                        help='Show a matplotlib plot: the graph itself or its degree distribution.')

    parser.add_argument('--log-level',
                        default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity (default: WARNING).')

    return parser.parse_args(argv)


def output_path(path: str, graph_file: str, multiple: bool) -> str:
    """
    Per-graph output path.

    With a single input the path is used as given; with several inputs the
    input file's stem is appended so outputs do not overwrite each other,
    e.g. out.dot + karate.edges -> out_karate.dot.
    """
    if not multiple:
        return path
    root, ext = os.path.splitext(path)
    stem = os.path.splitext(os.path.basename(graph_file))[0]
    return f"{root}_{stem}{ext}"


def print_metrics(metrics: GraphMetrics, distribution: bool = False) -> None:
    """
    Print the metrics block for one graph.

    Args:
        metrics: Results returned by analyze_graph()
        distribution: Also print one "Degree: d, Count: c" line per bucket

    Returns:
        None (prints results to console)
    """
    print(f"The number of Nodes: {metrics.vertex_count}")
    print(f"The number of Edges: {metrics.edge_count}")
    print(f"AverageDegree: {metrics.average_degree}")
    print(f"Density: {metrics.density}")
    print(f"Diameter is: {metrics.diameter}")
    print(f"Clustering Coefficient is: {metrics.clustering_coefficient}")

    if distribution:
        for degree, count in metrics.degree_distribution.items():
            print(f"Degree: {degree}, Count: {count}")
    print("")


def render_png(graph: GraphStore, png_path: str) -> None:
    """
    Write a .dot file beside png_path and run Graphviz on it.

    Raises:
        GraphvizNotFoundError: If the `dot` executable is not installed
        subprocess.CalledProcessError: If Graphviz exits with an error
    """
    dot_path = os.path.splitext(png_path)[0] + ".dot"
    write_dot(graph, dot_path)
    logger.info("Rendering %s -> %s", dot_path, png_path)
    try:
        subprocess.run(['dot', '-Tpng', dot_path, '-o', png_path], check=True)
    except FileNotFoundError as err:
        raise GraphvizNotFoundError("Graphviz 'dot' executable not found.") from err


def process_file(graph_file: str, args: argparse.Namespace, multiple: bool) -> None:
    """Parse, analyze and report one graph file. Errors propagate to main()."""
    graph = read_edge_list(graph_file)
    metrics = analyze_graph(graph, workers=args.workers)

    if args.json:
        print(json.dumps(metrics.as_dict(), indent=2, allow_nan=False))
    else:
        print(f"For graph {graph_file}")
        print_metrics(metrics, distribution=args.distribution)

    if args.dot:
        path = output_path(args.dot, graph_file, multiple)
        write_dot(graph, path)
        print(f"DOT written to '{path}'.")

    if args.render:
        path = output_path(args.render, graph_file, multiple)
        render_png(graph, path)
        print(f"Rendered '{path}'.")

    if args.plot == 'graph':
        plot_graph(graph, show=True)
    elif args.plot == 'degree':
        plot_degree_distribution(metrics.degree_distribution,
                                 title=f"Degree Distribution: {graph.name}", show=True)


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if args.workers is not None and args.workers < 1:
        print("Error: --workers must be a positive integer.")
        return 1

    multiple = len(args.graph_files) > 1
    failures = 0

    for graph_file in args.graph_files:
        try:
            process_file(graph_file, args, multiple)
        except GraphvizNotFoundError:
            print("Error: Graphviz 'dot' executable not found; install Graphviz to use --render.")
            failures += 1
        except FileNotFoundError as err:
            print(f"Error: File '{err.filename or graph_file}' not found. "
                  f"Please check the path and try again.")
            failures += 1
        except PermissionError as err:
            print(f"Error: Permission denied for '{err.filename or graph_file}'.")
            failures += 1
        except ParseError as err:
            print(f"Error: Invalid edge list: {err}")
            failures += 1
        except subprocess.CalledProcessError as err:
            print(f"Error: Graphviz failed with exit status {err.returncode}.")
            failures += 1
        except OSError as err:
            print(f"Error: Cannot process '{graph_file}': {err}")
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Iterator, List, Mapping, Optional, Tuple

from digraph.config import LoadConfig
from digraph.errors import LoadFailure, OutOfRangeVertex
from digraph.graph import Digraph
from digraph.logs import fatal, setup_logging

DEFAULT_CONFIG = "digraph.yml"


def main(argv: Optional[List[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    handler = setup_logging(sys.stderr, args.verbose or 0, args.keep_going)
    try:
        cfg = load_config(args.config)
        command = globals()[f"command_{args.command}"]
        command(args, cfg)
        handler.finish()
    finally:
        logging.getLogger().removeHandler(handler)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="digraph", description="inspect directed graphs stored as edge lists"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_show = commands.add_parser("show", help="print graphs")
    parser_show.add_argument("files", nargs="+", help="edge list files")

    parser_reverse = commands.add_parser("reverse", help="print reversed graphs")
    parser_reverse.add_argument("files", nargs="+", help="edge list files")

    parser_info = commands.add_parser("info", help="print vertex and edge counts")
    parser_info.add_argument("files", nargs="+", help="edge list files")

    parser_adj = commands.add_parser("adj", help="print the neighbors of a vertex")
    parser_adj.add_argument("file", help="edge list file")
    parser_adj.add_argument("vertex", type=int, help="vertex id")

    for subparser in [parser_show, parser_reverse, parser_info, parser_adj]:
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )
        subparser.add_argument(
            "-c",
            "--config",
            metavar="PATH",
            help=f"configuration file (default: {DEFAULT_CONFIG} if present)",
        )

    return parser, commands.choices


def load_config(path: Optional[str]) -> LoadConfig:
    """Load the configuration file, or return defaults if there is none."""
    if path is None:
        default = Path(DEFAULT_CONFIG)
        if not default.is_file():
            return LoadConfig.default()
        path = str(default)
    logging.info("using configuration %s", path)
    try:
        cfg = LoadConfig.load(Path(path))
    except OSError as ex:
        fatal("cannot read %s: %s", path, ex.strerror)
    cfg.validate()
    return cfg


def load_graphs(files: List[str], cfg: LoadConfig) -> Iterator[Tuple[str, Digraph]]:
    """Load each file, logging an error for those that fail."""
    for name in files:
        try:
            graph = Digraph.load(name, strict=cfg["strict"])
        except LoadFailure as ex:
            logging.error("%s", ex)
            continue
        logging.info("loaded %s: %r", name, graph)
        yield name, graph


def command_show(args: Namespace, cfg: LoadConfig):
    for _, graph in load_graphs(args.files, cfg):
        graph.dump(sys.stdout)


def command_reverse(args: Namespace, cfg: LoadConfig):
    for _, graph in load_graphs(args.files, cfg):
        graph.reverse().dump(sys.stdout)


def command_info(args: Namespace, cfg: LoadConfig):
    for name, graph in load_graphs(args.files, cfg):
        print(f"{name}: {graph.num_vertices} vertices, {graph.num_edges} edges")


def command_adj(args: Namespace, cfg: LoadConfig):
    for _, graph in load_graphs([args.file], cfg):
        try:
            neighbors = list(graph.adjacent_to(args.vertex))
        except OutOfRangeVertex as ex:
            logging.error("%s: %s", args.file, ex)
            return
        if cfg["sort_neighbors"]:
            neighbors.sort()
        for vertex in neighbors:
            print(vertex)

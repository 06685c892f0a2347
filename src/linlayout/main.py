"""Main entry point for linlayout."""

import argparse
import logging
from pathlib import Path

import yaml

from .core.node import ViewNode
from .layout import LayoutLoader, LinearLayout


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="linlayout - inspect linear layout definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        metavar="PATH",
        help="Layout definition YAML file",
    )
    parser.add_argument(
        "-r", "--relations",
        action="store_true",
        help="List every installed relation",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log layout mutations while loading",
    )
    return parser.parse_args(argv)


def describe_node(node: ViewNode) -> str:
    """One-line description of a node for the tree listing."""
    if isinstance(node, LinearLayout):
        return f"{node.name} [{node.axis.name}, {node.member_count} members]"
    return node.name


def main(argv: list[str] | None = None) -> int:
    """Load a layout definition and print its tree."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        root = LayoutLoader().load(Path(args.path))
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Layout contains {len(list(root.iter_nodes()))} nodes:")
    for node in root.iter_nodes():
        indent = "  " * node.depth
        print(f"{indent}- {describe_node(node)}")

    if args.relations:
        relations = list(root.iter_constraints())
        print(f"\n{len(relations)} relations:")
        for owner, relation in relations:
            print(f"  [{owner.name}] {relation}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

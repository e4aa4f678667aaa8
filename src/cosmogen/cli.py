# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for universe generation.

Usage:
    # Universe down to galaxy groups, reproducible
    cosmogen --seed 42 --depth 3 -o universe.json

    # A single star system and everything inside it
    cosmogen --root star_system --seed 7 --depth 1 -o system.json

    # Reload a snapshot and print its tree
    cosmogen --load universe.json
"""
import argparse
import logging
import sys

from cosmogen.adapters.json_io import JsonSnapshotReader, JsonSnapshotWriter
from cosmogen.domain.constants import GenerationDefaults
from cosmogen.domain.cosmic_location import CosmicLocation, restore_tree
from cosmogen.domain.errors import ConstructionError, OrphanOrbitReference
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.structure import CosmicStructureType

logger = logging.getLogger(__name__)


def generate(
    root_type: CosmicStructureType = CosmicStructureType.UNIVERSE,
    seed: int | None = None,
    depth: int = 2,
    children: int = GenerationDefaults.CHILD_LIMIT,
) -> CosmicLocation:
    """
    Generate a root location and populate it ``depth`` levels down.

    Returns:
        The root location.
    """
    rng = RandomSource(seed)
    root = CosmicLocation.create(root_type, rng=rng)
    level = [root]
    for current in range(depth):
        next_level = []
        for node in level:
            next_level.extend(node.generate_children(limit=children, rng=rng))
            next_level.extend(c for c in node.children if c not in next_level)
        logger.info("level %d: %d locations", current + 1, len(next_level))
        level = next_level
    return root


def describe(root: CosmicLocation) -> list[str]:
    """One indented line per location in the tree."""
    lines = []

    def visit(node: CosmicLocation, indent: int) -> None:
        lines.append(f"{'  ' * indent}{node.name}  mass={node.mass:.3e} kg  r={node.bounding_radius:.3e} m")
        for child in node.children:
            visit(child, indent + 1)

    visit(root, 0)
    return lines


def main():
    parser = argparse.ArgumentParser(
        description="Generate a hierarchical procedural universe"
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help="Seed for reproducible generation (unsigned 32-bit; default: random)"
    )
    parser.add_argument(
        '--depth', type=int, default=2,
        help="Levels of children to generate below the root (default: 2)"
    )
    parser.add_argument(
        '--children', type=int, default=GenerationDefaults.CHILD_LIMIT,
        help=f"Maximum children per location (default: {GenerationDefaults.CHILD_LIMIT})"
    )
    parser.add_argument(
        '--root', default=CosmicStructureType.UNIVERSE.value,
        choices=[t.value for t in CosmicStructureType],
        help="Structure type of the root location (default: universe)"
    )
    parser.add_argument(
        '--output', '-o',
        help="Path to write a JSON snapshot of the generated tree"
    )
    parser.add_argument(
        '--load',
        help="Read a JSON snapshot instead of generating"
    )
    parser.add_argument(
        '--verbose', '-v', action='count', default=0,
        help="Log generation progress (-vv for debug detail)"
    )

    args = parser.parse_args()

    if args.depth < 0:
        parser.error("--depth must be >= 0")
    if args.children < 0:
        parser.error("--children must be >= 0")

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.load:
            roots = restore_tree(JsonSnapshotReader().read_snapshot(args.load))
        else:
            roots = [generate(
                root_type=CosmicStructureType(args.root),
                seed=args.seed,
                depth=args.depth,
                children=args.children,
            )]

        for root in roots:
            print("\n".join(describe(root)))

        if args.output:
            records = [node.capture() for root in roots for node in root.walk()]
            count = JsonSnapshotWriter().write_snapshot(records, args.output)
            print(f"Wrote {count} locations to {args.output}")

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (ConstructionError, OrphanOrbitReference, ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()

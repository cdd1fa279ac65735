"""
CLI Info Tool
"""

import sys
import math
import logging
import argparse

from ghg_sunburst.config import Settings
from ghg_sunburst.core.aggregation import subtree_value
from ghg_sunburst.core.constants import RING_TITLES
from ghg_sunburst.core.formatting import figure_title, format_pct
from ghg_sunburst.core.hierarchy_store import build_tree
from ghg_sunburst.core.pipeline import redraw
from ghg_sunburst.data.loader import load_json
from ghg_sunburst.data.sectors import SectorCatalog, load_classification
from ghg_sunburst.exceptions import GhgSunburstError


def main(argv=None):
    """Main CLI entry point for sector breakdowns"""
    parser = argparse.ArgumentParser(
        description='GHG Sunburst - Sector Breakdown'
    )

    parser.add_argument('dataset', nargs='?',
                       help='Sunburst JSON path or URL (default: configured sources)')
    parser.add_argument('--sector', '-s',
                       help='Sector code or name; lists sectors when omitted')
    parser.add_argument('--min-pct', type=float, default=None,
                       help='Hide arcs below this share of the total, in percent')
    parser.add_argument('--classification', '-c',
                       help='Sector classification JSON-LD path or URL')
    parser.add_argument('--arcs', '-a', action='store_true',
                       help='Show arc geometry')
    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Verbose logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    data_sources = [args.dataset] if args.dataset else settings.data_sources
    class_sources = [args.classification] if args.classification else settings.class_sources
    min_pct = settings.default_min_pct if args.min_pct is None else args.min_pct

    try:
        dataset = load_json(data_sources, "sunburst data", timeout=settings.request_timeout)
        names = load_classification(class_sources, timeout=settings.request_timeout)
        catalog = SectorCatalog.from_dataset(dataset, names)

        if not args.sector:
            print(f"\nSectors ({len(catalog)})")
            print(f"{'='*60}")
            for option in catalog.options:
                total = subtree_value(build_tree(dataset, option.code))
                print(f"{option.code:<12} {format_pct(total):>8}  {option.name}")
            return 0

        view = redraw(dataset, args.sector, max(0.0, min_pct) / 100)
        if view.is_empty:
            print(f"\n{view.tree.name}: {args.sector}", file=sys.stderr)
            return 1

        print(f"\n{figure_title(catalog.name_for(args.sector))}")
        print(f"{'='*60}")
        print(f"Total:         {format_pct(view.total)}")
        print(f"Arcs:          {len(view.layout.nodes)} ({len(view.layout.visible_nodes())} visible)")

        for depth in (1, 2, 3):
            print(f"\n{RING_TITLES[depth]}")
            print(f"{'-'*60}")
            for row in view.summaries.rows(depth):
                print(f"{row.name:<48} {format_pct(row.value):>10}")

        if args.arcs:
            print(f"\nArcs")
            print(f"{'-'*60}")
            for node in view.layout.nodes:
                flag = ' ' if node.visible else '-'
                print(f"{flag} {'  ' * (node.depth - 1)}{node.name:<40} "
                      f"{math.degrees(node.angle_start):7.2f}-{math.degrees(node.angle_end):7.2f} deg  "
                      f"r {node.radius_inner:.0f}-{node.radius_outer:.0f}  {format_pct(node.value)}")

        return 0

    except GhgSunburstError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())

#!/usr/bin/env python3

import sys
import argparse
import logging

from airspace_explorer.sources import SyntheticAirspaceSource
from airspace_explorer.sources.synthetic import DEFAULT_COUNT
from airspace_explorer.storage import JsonDatasetStorage

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description='Generate a synthetic airspace dataset')
    parser.add_argument('-n', '--count', type=int, default=DEFAULT_COUNT,
                        help=f'Number of airspaces to generate (default: {DEFAULT_COUNT})')
    parser.add_argument('-s', '--seed', type=int, default=None,
                        help='Random seed for a reproducible dataset')
    parser.add_argument('-o', '--output', default='airspaceData.json',
                        help='Output JSON file (default: airspaceData.json)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        source = SyntheticAirspaceSource(count=args.count, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    dataset = source.generate()
    JsonDatasetStorage(args.output).save(dataset)

    stats = dataset.get_statistics()
    logger.info(f"Generated {stats['total_airspaces']} airspaces in {args.output}")
    for kind, count in stats['shapes_by_kind'].items():
        logger.debug(f"  {kind}: {count}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

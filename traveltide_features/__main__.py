"""
Command line entry point for the TravelTide user feature pipeline.

Usage:
    python -m traveltide_features --source csv --raw-extract
    python -m traveltide_features --source db --cache
"""

import argparse
import logging
import sys
from typing import List, Optional

from traveltide_features.utils import get_path, load_config, setup_logging
from traveltide_features.core.processing import DataLoader
from traveltide_features.core.features import PipelineConfig, UserFeaturePipeline
from traveltide_features.core.export import DataExporter

logger = logging.getLogger("traveltide_features.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='TravelTide user feature pipeline')
    parser.add_argument('--config', default=None, help='Path to config YAML (default: config/config.yaml)')
    parser.add_argument('--source', choices=['csv', 'db'], default=None, help='Where to read the input tables from')
    parser.add_argument('--activity-start', default=None, help='First day of the activity window (YYYY-MM-DD)')
    parser.add_argument('--min-sessions', type=int, default=None, help='Users need strictly more sessions than this')
    parser.add_argument('--raw-extract', action='store_true', help='Also write the per-session raw extract')
    parser.add_argument('--cache', action='store_true', help='With --source db, also save the input tables as raw CSVs')
    parser.add_argument('--output-dir', default=None, help='Output folder (default: data/csv/processed/features)')
    parser.add_argument('--log-level', default='INFO')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_config(args.config)
        if args.activity_start is not None:
            config['pipeline']['activity_start'] = args.activity_start
        if args.min_sessions is not None:
            config['pipeline']['min_sessions'] = args.min_sessions
        source = args.source or config['input']['source']

        pipeline_config = PipelineConfig.from_dict(config)

        loader = DataLoader(chunk_size=config['input'].get('chunk_size'))
        try:
            tables = loader.load_inputs(source=source, cache=args.cache)
        finally:
            loader.close()

        pipeline = UserFeaturePipeline(
            tables['users'], tables['sessions'], tables['flights'], tables['hotels'],
            config=pipeline_config,
        )
        features = pipeline.run()
        raw_extract = pipeline.raw_extract() if args.raw_extract else None

        exporter = DataExporter(
            args.output_dir or get_path('features_processed'),
            features_file=config['output']['features_file'],
            raw_extract_file=config['output']['raw_extract_file'],
        )
        exporter.export(features, raw_extract)

    except (FileNotFoundError, ValueError, ConnectionError) as e:
        logger.error(f"❌ Pipeline failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

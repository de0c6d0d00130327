#!/usr/bin/env python3
"""Music Cluster Analysis Pipeline - CLI

Reads a table of songs, reduces their audio features, assigns each song to a
cluster, and writes per-cluster averages and counts.

Usage:
    python run_analysis.py                                  # top1000_songs.csv -> music_clusters.csv
    python run_analysis.py --input songs.csv --output out.csv
    python run_analysis.py --target-dims 3 --clusters 5
    python run_analysis.py --reducer pca --assigner k-means # Real PCA + k-means
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

from music_clusters.pipeline import config, orchestrator


def setup_logging(log_dir: str = config.DEFAULT_PATHS["log_dir"]):
    """Configure logging to file and console."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"analysis_{timestamp}.log"

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(),
        ],
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Logging to {log_file}")
    return logger


def build_parser() -> argparse.ArgumentParser:
    defaults = config.DEFAULT_CLUSTERING_PARAMS

    parser = argparse.ArgumentParser(
        description="Cluster songs by audio features and summarize each cluster",
        epilog="""
Examples:
  python run_analysis.py                                  # Default files, 2 dims, 3 clusters
  python run_analysis.py --input songs.csv --output out.csv
  python run_analysis.py --reducer pca --assigner k-means # Real PCA + k-means

Input CSV needs columns: danceability, acousticness, energy, valence, tempo, decade
Output CSV columns:      Cluster, Danceability, Acousticness, Energy, Valence, Tempo, Count
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--input",
        default=config.DEFAULT_PATHS["input"],
        help=f"Song CSV to read (default: {config.DEFAULT_PATHS['input']})",
    )
    parser.add_argument(
        "--output",
        default=config.DEFAULT_PATHS["output"],
        help=f"Summary CSV to write (default: {config.DEFAULT_PATHS['output']})",
    )
    parser.add_argument(
        "--target-dims",
        type=int,
        default=defaults["target_dims"],
        help=f"Width of the reduced feature vectors (default: {defaults['target_dims']})",
    )
    parser.add_argument(
        "--clusters",
        type=int,
        default=defaults["n_clusters"],
        help=f"Number of clusters (default: {defaults['n_clusters']})",
    )
    parser.add_argument(
        "--reducer",
        choices=config.REDUCER_CHOICES,
        default=defaults["reducer"],
        help=f"Dimensionality reduction (default: {defaults['reducer']})",
    )
    parser.add_argument(
        "--assigner",
        choices=config.ASSIGNER_CHOICES,
        default=defaults["assigner"],
        help=f"Cluster assignment (default: {defaults['assigner']})",
    )
    parser.add_argument(
        "--log-dir",
        default=config.DEFAULT_PATHS["log_dir"],
        help=f"Directory for log files (default: {config.DEFAULT_PATHS['log_dir']})",
    )
    return parser


def main(argv=None):
    """Run the music cluster analysis pipeline."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_dir)

    print("=" * 60)
    print("MUSIC CLUSTER ANALYSIS")
    print("=" * 60)
    print(f"Input: {args.input}")
    print(f"Reducer: {args.reducer} ({args.target_dims} dims)")
    print(f"Assigner: {args.assigner} ({args.clusters} clusters)")
    print("=" * 60)

    logger.info(f"Starting analysis: input={args.input}, output={args.output}")
    start_time = datetime.now()

    try:
        orchestrator.run_full_pipeline(
            input_path=args.input,
            output_path=args.output,
            target_dims=args.target_dims,
            n_clusters=args.clusters,
            reducer=args.reducer,
            assigner=args.assigner,
        )
    except Exception as e:
        logger.error(f"Analysis failed: {e}")
        raise

    elapsed = datetime.now() - start_time
    print("\n" + "=" * 60)
    print("ANALYSIS COMPLETE!")
    print("=" * 60)
    print(f"\nCluster analysis written to {args.output}")
    print(f"Total time: {elapsed}")

    logger.info(f"Analysis complete! Total time: {elapsed}")


if __name__ == "__main__":
    main()

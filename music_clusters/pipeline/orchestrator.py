#!/usr/bin/env python3
"""Pipeline orchestration for music cluster analysis.

This module coordinates all steps of the analysis: loading songs, clustering,
and writing the per-cluster summary.

Used by the run_analysis.py CLI.
"""

import logging
from typing import Dict, Any

from music_clusters.pipeline import config
from music_clusters.pipeline.clustering import run_clustering_pipeline
from music_clusters.pipeline.loader import load_songs, write_summary

logger = logging.getLogger(__name__)


def run_full_pipeline(
    input_path: str = config.DEFAULT_PATHS["input"],
    output_path: str = config.DEFAULT_PATHS["output"],
    **clustering_params: Any,
) -> Dict[str, Any]:
    """Run the complete pipeline: load -> cluster -> write.

    The output file is only written once every stage has succeeded.

    Args:
        input_path: Song CSV to read
        output_path: Summary CSV to write
        **clustering_params: Overrides for config.DEFAULT_CLUSTERING_PARAMS

    Returns:
        Results dict from run_clustering_pipeline()
    """
    params = {**config.DEFAULT_CLUSTERING_PARAMS, **clustering_params}
    logger.info(f"Starting pipeline: input={input_path}, output={output_path}, params={params}")

    # =========================================================================
    # STEP 1: Load songs
    # =========================================================================
    logger.info("[1/3] Loading songs...")
    print("\n[1/3] Loading songs...")

    songs = load_songs(input_path)
    print(f"  ✓ Loaded {len(songs)} songs")

    # =========================================================================
    # STEP 2: Cluster
    # =========================================================================
    logger.info("[2/3] Running clustering pipeline...")
    print("\n[2/3] Running clustering pipeline...")

    results = run_clustering_pipeline(songs, **params)
    print(f"  ✓ Found {results['n_clusters']} clusters")
    print(f"  ✓ Silhouette: {results['silhouette_score']:.3f}")

    # =========================================================================
    # STEP 3: Write summary
    # =========================================================================
    logger.info("[3/3] Writing cluster summary...")
    print("\n[3/3] Writing cluster summary...")

    write_summary(results['summary'], output_path)
    print(f"  ✓ Saved to {output_path}")

    return results

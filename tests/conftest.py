"""
Pytest configuration and shared fixtures for the music cluster tests.

This module provides:
- Small hand-checked song sets
- A seeded random song set
- CSV file fixtures
"""

import numpy as np
import pytest

from music_clusters.pipeline.records import SongRecord


CSV_HEADER = "danceability,acousticness,energy,valence,tempo,decade\n"


def make_song(danceability, acousticness=0.0, energy=0.0, valence=0.0, tempo=0.0, decade="X"):
    return SongRecord(danceability, acousticness, energy, valence, tempo, decade)


# =============================================================================
# Song Fixtures
# =============================================================================

@pytest.fixture
def example_songs():
    """Three songs whose truncated sums map to clusters 1, 2, 0 with k=3."""
    return [make_song(1.0), make_song(2.0), make_song(0.0)]


@pytest.fixture
def random_songs():
    """Generate 200 songs with realistic feature ranges."""
    rng = np.random.default_rng(42)
    n = 200
    danceability = rng.uniform(0.0, 1.0, n)
    acousticness = rng.uniform(0.0, 1.0, n)
    energy = rng.uniform(0.0, 1.0, n)
    valence = rng.uniform(0.0, 1.0, n)
    tempo = rng.uniform(60.0, 200.0, n)
    decades = rng.choice(["1960s", "1970s", "1980s", "1990s", "2000s"], n)

    return [
        SongRecord(
            float(danceability[i]),
            float(acousticness[i]),
            float(energy[i]),
            float(valence[i]),
            float(tempo[i]),
            str(decades[i]),
        )
        for i in range(n)
    ]


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def songs_csv(tmp_path):
    """CSV with an extra column and a mix of decades."""
    path = tmp_path / "songs.csv"
    path.write_text(
        "title,danceability,acousticness,energy,valence,tempo,decade\n"
        "a,0.8,0.1,0.7,0.6,120.0,1980s\n"
        "b,0.5,0.4,0.3,0.2,95.5,1990s\n"
        "c,1.5,0.2,0.9,0.9,128.0,2000s\n"
        "d,-0.4,0.0,0.0,0.0,100.0,2010s\n"
    )
    return path


@pytest.fixture
def empty_csv(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text(CSV_HEADER)
    return path

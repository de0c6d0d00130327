"""Unit tests for CSV loading and summary writing."""

import pandas as pd
import pytest

from music_clusters.pipeline.loader import load_songs, write_summary
from music_clusters.pipeline.records import SongRecord


@pytest.mark.unit
class TestLoadSongs:

    def test_loads_in_file_order(self, songs_csv):
        songs = load_songs(str(songs_csv))

        assert len(songs) == 4
        assert songs[0] == SongRecord(0.8, 0.1, 0.7, 0.6, 120.0, "1980s")
        assert [s.decade for s in songs] == ["1980s", "1990s", "2000s", "2010s"]

    def test_header_only_file(self, empty_csv):
        assert load_songs(str(empty_csv)) == []

    def test_missing_column(self, tmp_path):
        path = tmp_path / "songs.csv"
        path.write_text("danceability,acousticness,energy,valence,decade\n0.1,0.2,0.3,0.4,1990s\n")

        with pytest.raises(ValueError, match="tempo"):
            load_songs(str(path))

    def test_non_numeric_value(self, tmp_path):
        path = tmp_path / "songs.csv"
        path.write_text(
            "danceability,acousticness,energy,valence,tempo,decade\n"
            "0.1,0.2,0.3,0.4,120,1990s\n"
            "0.1,0.2,loud,0.4,120,1990s\n"
        )

        with pytest.raises(ValueError, match=r"'energy'.*\[2\]"):
            load_songs(str(path))

    def test_missing_value(self, tmp_path):
        path = tmp_path / "songs.csv"
        path.write_text(
            "danceability,acousticness,energy,valence,tempo,decade\n"
            "0.1,0.2,0.3,0.4,,1990s\n"
        )

        with pytest.raises(ValueError, match="'tempo'"):
            load_songs(str(path))

    @pytest.mark.parametrize("value", ["inf", "-inf", "nan"])
    def test_non_finite_value(self, tmp_path, value):
        path = tmp_path / "songs.csv"
        path.write_text(
            "danceability,acousticness,energy,valence,tempo,decade\n"
            "0.1,0.2,0.3,0.4,120,1990s\n"
            "0.1,0.2,0.3,0.4,120,2000s\n"
            f"0.1,{value},0.3,0.4,120,2010s\n"
        )

        with pytest.raises(ValueError, match=r"'acousticness'.*\[3\]"):
            load_songs(str(path))

    def test_numeric_looking_labels_kept_verbatim(self, tmp_path):
        path = tmp_path / "songs.csv"
        path.write_text(
            "danceability,acousticness,energy,valence,tempo,decade\n"
            "0.1,0.2,0.3,0.4,120,00\n"
            "0.5,0.6,0.7,0.8,90,1990\n"
            "0.5,0.6,0.7,0.8,90,NA\n"
        )

        songs = load_songs(str(path))

        assert [s.decade for s in songs] == ["00", "1990", "NA"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_songs(str(tmp_path / "nope.csv"))


@pytest.mark.unit
class TestWriteSummary:

    def test_two_decimal_places(self, tmp_path):
        summary = pd.DataFrame(
            [[0, 0.123, 0.5, 1.0, 0.666666, 120.456, 3]],
            columns=["Cluster", "Danceability", "Acousticness", "Energy", "Valence", "Tempo", "Count"],
        )
        path = tmp_path / "out" / "clusters.csv"

        write_summary(summary, str(path))

        assert path.read_text().splitlines() == [
            "Cluster,Danceability,Acousticness,Energy,Valence,Tempo,Count",
            "0,0.12,0.50,1.00,0.67,120.46,3",
        ]

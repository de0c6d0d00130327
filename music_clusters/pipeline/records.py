"""Record types shared by the clustering pipeline."""

from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from .config import FEATURE_COLUMNS, LABEL_COLUMN


@dataclass(frozen=True)
class SongRecord:
    """One input row: five audio attributes plus its decade tag."""

    danceability: float
    acousticness: float
    energy: float
    valence: float
    tempo: float
    decade: str

    FEATURE_FIELDS = tuple(FEATURE_COLUMNS)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SongRecord":
        """Build a record from a parsed table row (extra keys are ignored)."""
        values = {name: float(row[name]) for name in cls.FEATURE_FIELDS}
        return cls(**values, decade=str(row[LABEL_COLUMN]))

    def features(self) -> Tuple[float, ...]:
        return tuple(getattr(self, name) for name in self.FEATURE_FIELDS)


@dataclass
class ClusterStats:
    """Running sums and count for a single cluster id."""

    cluster: int
    danceability: float = 0.0
    acousticness: float = 0.0
    energy: float = 0.0
    valence: float = 0.0
    tempo: float = 0.0
    count: int = 0

    def update(self, song: SongRecord):
        """Fold one song into the running sums."""
        self.danceability += song.danceability
        self.acousticness += song.acousticness
        self.energy += song.energy
        self.valence += song.valence
        self.tempo += song.tempo
        self.count += 1

    def averages(self) -> Tuple[float, float, float, float, float]:
        """Return the five attribute means (all zeros for an empty cluster)."""
        if self.count == 0:
            return (0.0, 0.0, 0.0, 0.0, 0.0)

        count = float(self.count)
        return (
            self.danceability / count,
            self.acousticness / count,
            self.energy / count,
            self.valence / count,
            self.tempo / count,
        )

"""
Ranking engine: scores the whole catalog against the user's preference
vector and exposes the top-K slice.

Every call is independent. The full catalog is re-scored on each call and
nothing is cached between calls.
"""

import numbers
from collections import namedtuple

import pandas as pd

from vector_math import as_vector3, cosine_similarity

DEFAULT_TOP_K = 5


class ScoredItem(namedtuple("ScoredItem", ["movie", "score"])):
    """A catalog item paired with its similarity to the user's vector."""

    __slots__ = ()

    @property
    def id(self):
        return self.movie.id

    @property
    def title(self):
        return self.movie.title

    @property
    def year(self):
        return self.movie.year

    @property
    def genres(self):
        return self.movie.genres

    @property
    def vector(self):
        return self.movie.vector


def score_catalog(user_vector, catalog):
    """
    Compute the similarity of every catalog item to the user's vector.

    Args:
        user_vector: Vector3 of (tone, intensity, complexity)
        catalog: Sequence of CatalogItem

    Returns:
        List of ScoredItem in catalog order
    """
    user_vector = as_vector3(user_vector)
    return [ScoredItem(movie, cosine_similarity(user_vector, movie.vector)) for movie in catalog]


def rank_movies(user_vector, catalog):
    """
    Rank the full catalog by descending similarity.

    sorted() is stable with reverse=True as well, so items with equal
    scores keep their relative catalog order.

    Args:
        user_vector: Vector3 of (tone, intensity, complexity)
        catalog: Sequence of CatalogItem

    Returns:
        List of ScoredItem, highest score first
    """
    return sorted(score_catalog(user_vector, catalog), key=lambda s: s.score, reverse=True)


def top_k_recommendations(user_vector, catalog, k=DEFAULT_TOP_K):
    """
    Top-K recommendations for a preference vector.

    Args:
        user_vector: Vector3 of (tone, intensity, complexity)
        catalog: Sequence of CatalogItem
        k: Number of recommendations (>= 0)

    Returns:
        List of min(k, len(catalog)) ScoredItem, highest score first
    """
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise TypeError(f"k must be an integer, got {k!r}")
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    return rank_movies(user_vector, catalog)[:int(k)]


def ranked_to_dataframe(scored_items):
    """Tabular view of a ranked list, one row per item in list order."""
    rows = [
        {
            "rank": rank,
            "id": s.id,
            "title": s.title,
            "year": s.year,
            "genres": ", ".join(s.genres),
            "tone": s.vector.x,
            "intensity": s.vector.y,
            "complexity": s.vector.z,
            "similarity": s.score
        }
        for rank, s in enumerate(scored_items, start=1)
    ]
    return pd.DataFrame(
        rows,
        columns=["rank", "id", "title", "year", "genres", "tone", "intensity", "complexity", "similarity"]
    )

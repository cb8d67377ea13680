"""
Utility functions and constants for the slider-based movie recommender.
"""

import os
import html
import streamlit as st

from vector_math import as_vector3, normalize_input
from catalog import load_catalog
from ranking_engine import DEFAULT_TOP_K

# Global configuration constants
PREFERENCE_DIMENSIONS = ("tone", "intensity", "complexity")

DIMENSION_LABELS = {
    "tone": {
        "label": "Tone",
        "min_label": "Dark / Serious",
        "max_label": "Light / Happy",
        "description": "From noir-level darkness to musical-level brightness.",
        "color": "#60a5fa"
    },
    "intensity": {
        "label": "Intensity",
        "min_label": "Calm / Slow",
        "max_label": "Intense / Fast",
        "description": "From meditative slow burns to breathless action.",
        "color": "#f87171"
    },
    "complexity": {
        "label": "Complexity",
        "min_label": "Simple / Popcorn",
        "max_label": "Complex / Artistic",
        "description": "From easy popcorn movies to films that make you think.",
        "color": "#4ade80"
    }
}

SLIDER_MIN = 1.0
SLIDER_MAX = 10.0
SLIDER_STEP = 0.5
DEFAULT_PREFERENCE = 5.0

MAX_TOP_K = 20

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CATALOG_FILE = os.path.join(PROJECT_ROOT, "data", "movies.csv")


@st.cache_resource
def get_catalog():
    """Load the static movie catalog once per process and share it read-only."""
    return load_catalog(CATALOG_FILE)


def preference_vector(tone, intensity, complexity):
    """Build the user's preference Vector3 from the three slider values."""
    return as_vector3((
        normalize_input(tone),
        normalize_input(intensity),
        normalize_input(complexity)
    ))


def clamp_preference(value):
    """Clamp a value into the slider range."""
    return max(SLIDER_MIN, min(SLIDER_MAX, value))


def snap_preference(value):
    """Clamp a value into the slider range and round it to the slider step."""
    return round(clamp_preference(value) / SLIDER_STEP) * SLIDER_STEP


def parse_query_value(raw, default, low, high, cast=float):
    """
    Parse a URL query parameter into a number within [low, high].

    Args:
        raw: Raw value from st.query_params (string, list of strings, or None)
        default: Value returned when raw is missing or unparsable
        low: Lower bound
        high: Upper bound
        cast: Numeric type to convert to

    Returns:
        Parsed and clamped number, or default
    """
    if isinstance(raw, (list, tuple)):
        raw = raw[0] if raw else None
    if raw is None:
        return default

    try:
        value = cast(raw)
    except (ValueError, TypeError):
        return default

    if value != value:  # NaN
        return default
    return max(low, min(high, value))


def format_similarity(score):
    """Format a similarity score as a percentage with one decimal."""
    return f"{score * 100:.1f}%"


def similarity_bar_width(score):
    """Width (0-100) of the background similarity bar on a movie card."""
    return max(0.0, min(100.0, score * 100))


def movie_card_html(rank, scored):
    """
    HTML for one ranked movie card.

    Title and genre labels come from the dataset and are escaped.

    Args:
        rank: 1-based position in the ranked list
        scored: ScoredItem to render

    Returns:
        HTML string
    """
    genre_tags = "".join(
        f'<span class="genre-tag">{html.escape(str(g))}</span>' for g in scored.genres
    )
    return f'''
    <div class="movie-card">
        <div class="similarity-bar" style="width: {similarity_bar_width(scored.score):.1f}%;"></div>
        <div class="card-left">
            <div class="rank-badge">#{rank}</div>
            <div>
                <span class="movie-title">{html.escape(str(scored.title))}</span>
                <span class="movie-year">{int(scored.year)}</span>
                <div>{genre_tags}</div>
            </div>
        </div>
        <div class="card-right">
            <div class="similarity-label">Similarity</div>
            <div class="similarity-value">{format_similarity(scored.score)}</div>
        </div>
    </div>
    '''

"""
Static movie catalog: immutable records and dataset loading.
"""

import os
import math
import numbers
from collections import namedtuple

import pandas as pd

from vector_math import as_vector3

CatalogItem = namedtuple("CatalogItem", ["id", "title", "year", "genres", "vector"])

CATALOG_COLUMNS = ["id", "title", "year", "genres", "tone", "intensity", "complexity"]


class CatalogError(ValueError):
    """Raised when a dataset cannot be turned into a valid catalog."""


def _parse_genres(genres):
    if genres is None:
        return ()
    if isinstance(genres, float) and genres != genres:  # pandas NaN for an empty cell
        return ()
    if isinstance(genres, str):
        return tuple(g.strip() for g in genres.split("|") if g.strip())
    return tuple(str(g).strip() for g in genres if str(g).strip())


def _parse_int(value, field):
    if isinstance(value, bool):
        raise TypeError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        if not math.isfinite(value) or not float(value).is_integer():
            raise ValueError(f"{field} must be an integer, got {value!r}")
        return int(value)
    return int(str(value).strip())


def _parse_title(title):
    if isinstance(title, float) and title != title:  # pandas NaN for an empty cell
        title = ""
    title = str(title).strip() if title is not None else ""
    if not title:
        raise ValueError("title must not be blank")
    return title


def make_catalog_item(record):
    """
    Build a single CatalogItem from a record dictionary.

    Args:
        record: Dict with id, title, year, genres and either a "vector"
            entry or flat "tone"/"intensity"/"complexity" entries

    Returns:
        CatalogItem

    Raises:
        CatalogError: if a field is missing or malformed
    """
    try:
        if "vector" in record:
            vector = as_vector3(record["vector"])
        else:
            vector = as_vector3((record["tone"], record["intensity"], record["complexity"]))

        return CatalogItem(
            id=_parse_int(record["id"], "id"),
            title=_parse_title(record["title"]),
            year=_parse_int(record["year"], "year"),
            genres=_parse_genres(record.get("genres")),
            vector=vector
        )
    except KeyError as e:
        raise CatalogError(f"Catalog record {record!r} is missing field {e}") from None
    except (TypeError, ValueError) as e:
        raise CatalogError(f"Invalid catalog record {record!r}: {e}") from e


def build_catalog(records):
    """
    Build an immutable catalog from an ordered sequence of records.

    Args:
        records: Iterable of record dictionaries (see make_catalog_item)

    Returns:
        Tuple of CatalogItem in input order

    Raises:
        CatalogError: on malformed records or duplicate ids
    """
    items = []
    seen_ids = set()
    for record in records:
        item = make_catalog_item(record)
        if item.id in seen_ids:
            raise CatalogError(f"Duplicate catalog id: {item.id}")
        seen_ids.add(item.id)
        items.append(item)
    return tuple(items)


def load_catalog(path):
    """
    Load the catalog from a CSV file.

    Expected columns: id, title, year, genres, tone, intensity, complexity.
    Genres are separated by "|".

    Args:
        path: Path to the CSV file

    Returns:
        Tuple of CatalogItem in file order
    """
    if not os.path.exists(path):
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        df = pd.read_csv(path)
    except pd.errors.EmptyDataError:
        raise CatalogError(f"Catalog file is empty: {path}") from None

    missing = [col for col in CATALOG_COLUMNS if col not in df.columns]
    if missing:
        raise CatalogError(f"Catalog file {path} is missing columns: {', '.join(missing)}")

    return build_catalog(df[CATALOG_COLUMNS].to_dict(orient="records"))


def catalog_to_dataframe(catalog):
    """One row per catalog item with its coordinates, for plotting."""
    rows = [
        {
            "id": m.id,
            "title": m.title,
            "year": m.year,
            "tone": m.vector.x,
            "intensity": m.vector.y,
            "complexity": m.vector.z
        }
        for m in catalog
    ]
    return pd.DataFrame(rows, columns=["id", "title", "year", "tone", "intensity", "complexity"])

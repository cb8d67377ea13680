"""
Slider-based Movie Recommender - Source Package

This package contains the core functionality for the vector-similarity recommender:
- vector_math: Vector3 type, dot product, magnitude and cosine similarity
- catalog: Immutable catalog records and static dataset loading
- ranking_engine: Scoring, stable ranking and top-K selection
- utils: Utility functions and configuration constants
"""

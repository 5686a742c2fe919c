"""Converters from parsed instances to the structures downstream solvers use."""

from .dataframe import distance_matrix, instance_to_dataframe

__all__ = [
    "distance_matrix",
    "instance_to_dataframe"
]

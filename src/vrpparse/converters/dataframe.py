"""
Converters from a parsed instance to tabular and matrix forms.
"""

__all__ = ["instance_to_dataframe", "distance_matrix"]

import numpy as np
import pandas as pd

from vrpparse.models import Instance

COLUMNS = [
    'Node_ID', 'X', 'Y', 'Demand', 'Ready_Time', 'Due_Date', 'Service_Time',
    'Pickup_Index', 'Delivery_Index',
]

def instance_to_dataframe(instance: Instance) -> pd.DataFrame:
    """
    Build a DataFrame with one row per node, in file order.
    Args:
        instance: Parsed instance.
    Returns:
        DataFrame with the columns in ``COLUMNS``. The pickup/delivery
        columns use the nullable ``Int64`` dtype and are empty on 7-field rows.
    """
    records = []
    for node in instance.nodes:
        records.append({
            'Node_ID': node.id,
            'X': node.x,
            'Y': node.y,
            'Demand': node.demand,
            'Ready_Time': node.ready_time,
            'Due_Date': node.due_date,
            'Service_Time': node.service_time,
            'Pickup_Index': node.pickup_index,
            'Delivery_Index': node.delivery_index,
        })
    df = pd.DataFrame(records, columns=COLUMNS)
    for col in ('Pickup_Index', 'Delivery_Index'):
        df[col] = pd.array([record[col] for record in records], dtype='Int64')
    return df

def distance_matrix(instance: Instance) -> np.ndarray:
    """Euclidean distances between all nodes, indexed by row position."""
    coords = np.array([(node.x, node.y) for node in instance.nodes], dtype=float)
    deltas = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    return np.sqrt((deltas ** 2).sum(axis=-1))

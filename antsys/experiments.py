from __future__ import annotations
import os
from dataclasses import asdict
from typing import List, Tuple

import numpy as np
import pandas as pd

from .ant_system import AntSystem
from .colony import ACOConfig
from .labels import display_path
from .tsp import ATSPInstance


def run_rounds(instance: ATSPInstance, cfg: ACOConfig, n_rounds: int = 1,
               trace=None, rng=None) -> Tuple[pd.DataFrame, List[np.ndarray]]:
    """Call ``run_iteration`` ``n_rounds`` times on one colony.

    Returns one row per (round, ant) and a copy of the pheromone matrix taken
    after every round. Nothing is compared across rounds.
    """
    solver = AntSystem(instance.cost_matrix(), cfg, trace=trace, rng=rng)
    rows = []
    snapshots = []
    for it in range(n_rounds):
        for ant, (path, cost) in enumerate(solver.run_iteration()):
            rows.append({"round": it + 1, "ant": ant + 1, "path": display_path(path), "cost": cost})
        snapshots.append(solver.tau.copy())
    df = pd.DataFrame.from_records(rows, columns=["round", "ant", "path", "cost"])
    for k, v in asdict(cfg).items():
        df.attrs[k] = v
    return df, snapshots


def save_rounds_csv(df: pd.DataFrame, csv_path: str) -> str:
    d = os.path.dirname(csv_path)
    if d:
        os.makedirs(d, exist_ok=True)
    df.to_csv(csv_path, index=False)
    return csv_path

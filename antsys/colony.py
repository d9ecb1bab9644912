from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from .errors import InvalidDimension

Matrix = Union[np.ndarray, Sequence[Sequence[float]]]


@dataclass
class ACOConfig:
    alpha: float = 1.0          # pheromone influence
    beta: float = 2.0           # heuristic influence
    rho: float = 0.5            # retention factor: share of pheromone kept each round
    Q: float = 1.0              # pheromone deposit factor
    tau0: float = 1.0           # initial pheromone on every off-diagonal edge
    n_ants: int = 10
    start: int = 0              # every ant starts here
    seed: Optional[int] = None


def check_square(matrix: Matrix) -> None:
    rows = list(matrix)
    if not rows or any(np.ndim(row) != 1 or len(row) != len(rows) for row in rows):
        raise InvalidDimension(f"cost matrix must be square and non-empty ({len(rows)} rows)")


def init_pheromone_matrix(n: int, value: float) -> np.ndarray:
    tau = np.full((n, n), float(value))
    np.fill_diagonal(tau, 0.0)
    return tau


def visibility_matrix(D: np.ndarray) -> np.ndarray:
    # the diagonal turns into inf; it is never read
    with np.errstate(divide="ignore"):
        return 1.0 / D


class ColonyState:
    """Problem data (costs, visibility) and the mutable pheromone matrix.

    Built once from a cost matrix and a config. Only the iteration engine
    writes to ``tau``.
    """

    def __init__(self, cost_matrix: Matrix, cfg: ACOConfig):
        check_square(cost_matrix)
        D = np.array(cost_matrix, dtype=float)
        D.setflags(write=False)

        self.cfg = cfg
        self.n = D.shape[0]
        if not 0 <= cfg.start < self.n:
            raise IndexError(f"start city {cfg.start} outside [0, {self.n})")
        self.D = D
        self.eta = visibility_matrix(D)
        self.eta.setflags(write=False)
        self.tau = init_pheromone_matrix(self.n, cfg.tau0)

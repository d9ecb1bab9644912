from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .colony import check_square
from .errors import InvalidDimension


@dataclass
class ATSPInstance:
    costs: np.ndarray
    name: str = "atsp"

    def __post_init__(self):
        check_square(self.costs)
        self.costs = np.asarray(self.costs, dtype=float)

    @staticmethod
    def from_csv(path: str, name: Optional[str] = None) -> "ATSPInstance":
        """Header-less, comma separated square matrix."""
        try:
            df = pd.read_csv(path, header=None, skip_blank_lines=True)
        except pd.errors.ParserError as exc:
            raise InvalidDimension(f"{path}: rows have different lengths") from exc
        if df.isna().to_numpy().any():
            raise InvalidDimension(f"{path}: rows have different lengths")
        return ATSPInstance(costs=df.to_numpy(dtype=float), name=name or str(path))

    @staticmethod
    def from_text(path: str, name: Optional[str] = None) -> "ATSPInstance":
        """Whitespace separated square matrix, one row per line."""
        with open(path) as f:
            rows = [[float(x) for x in line.split()] for line in f if line.strip()]
        return ATSPInstance(costs=rows, name=name or str(path))

    @staticmethod
    def random_asymmetric(n: int, seed: Optional[int] = None, low: float = 1.0, high: float = 100.0,
                          name: str = "random_atsp") -> "ATSPInstance":
        if n < 2:
            raise ValueError("n >= 2")
        if low <= 0:
            raise ValueError("off-diagonal costs must be positive (low > 0)")
        rng = np.random.default_rng(seed)
        D = rng.uniform(low, high, size=(n, n)).round(2)
        np.fill_diagonal(D, 0.0)
        return ATSPInstance(costs=D, name=name)

    def n_cities(self) -> int:
        return self.costs.shape[0]

    def cost_matrix(self) -> np.ndarray:
        return self.costs

from __future__ import annotations
import random
from typing import List, Sequence, Set, Tuple

import numpy as np

from .colony import ACOConfig, ColonyState, Matrix
from .trace import (AntScored, AntStarted, CandidateProbability, CandidateScored,
                    CitySelected, EdgeUpdated, PathCompleted, RandomDrawn, WeightsSummed)


def path_cost(path: Sequence[int], D: np.ndarray) -> float:
    """Sum of the directed edges actually walked. The path is open: no return edge."""
    cost = 0.0
    for i, j in zip(path, path[1:]):
        cost += D[i, j]
    return float(cost)


def path_edges(path: Sequence[int]) -> Set[Tuple[int, int]]:
    return set(zip(path, path[1:]))


class _NoTrace:
    def emit(self, event) -> None:
        pass


class AntSystem:
    """Classic Ant System (AS), one round per ``run_iteration`` call.

    All ants start from ``cfg.start``. Every ant deposits ``Q / cost`` on the
    edges it used, after the whole matrix has been scaled by ``rho``.
    """

    def __init__(self, dist_matrix: Matrix, cfg: ACOConfig, trace=None, rng=None):
        self.state = ColonyState(dist_matrix, cfg)
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.trace = trace if trace is not None else _NoTrace()

    @property
    def n(self) -> int:
        return self.state.n

    @property
    def tau(self) -> np.ndarray:
        return self.state.tau

    def choose_next(self, ant: int, current: int, unvisited: List[int]) -> int:
        """Roulette-wheel pick over ``unvisited`` (ascending) from ``current``."""
        alpha, beta = self.cfg.alpha, self.cfg.beta
        tau, eta = self.state.tau, self.state.eta
        emit = self.trace.emit

        weights = []
        total = 0.0
        for j in unvisited:
            tau_a = float(tau[current, j] ** alpha)
            eta_b = float(eta[current, j] ** beta)
            w = tau_a * eta_b
            emit(CandidateScored(ant, current, j, tau_a, eta_b, w))
            weights.append((j, w))
            total += w
        emit(WeightsSummed(ant, current, total))

        probs = []
        for j, w in weights:
            # zero total: every probability is NaN and the last candidate is taken
            p = w / total if total > 0 else float("nan")
            emit(CandidateProbability(ant, current, j, p))
            probs.append((j, p))

        r = self.rng.random()
        emit(RandomDrawn(ant, r))

        acc = 0.0
        last = len(probs) - 1
        for k, (j, p) in enumerate(probs):
            acc += p
            # float mass may fall short of 1.0, so the last candidate always catches
            if r < acc or k == last:
                return j
        raise RuntimeError("no candidate left to choose from")

    def build_path(self, ant: int) -> List[int]:
        n = self.state.n
        start = self.cfg.start
        path = [start]
        self.trace.emit(AntStarted(ant, start))
        while len(path) < n:
            current = path[-1]
            visited = set(path)
            unvisited = [j for j in range(n) if j not in visited]
            nxt = self.choose_next(ant, current, unvisited)
            self.trace.emit(CitySelected(ant, nxt))
            path.append(nxt)
        self.trace.emit(PathCompleted(ant, tuple(path)))
        return path

    def update_pheromones(self, paths: List[List[int]], costs: List[float]) -> None:
        """Evaporate every cell, then add Q/cost for each ant that used the edge."""
        rho, Q = self.cfg.rho, self.cfg.Q
        tau = self.state.tau
        edges = [path_edges(p) for p in paths]
        n = self.state.n
        for r in range(n):
            for c in range(n):
                evaporated = rho * tau[r, c]
                tau[r, c] = evaporated
                deposits = []
                for used, cost in zip(edges, costs):
                    if (r, c) in used:
                        dta = Q / cost
                        tau[r, c] += dta
                    else:
                        dta = 0.0
                    deposits.append(dta)
                self.trace.emit(EdgeUpdated(r, c, float(evaporated), tuple(deposits), float(tau[r, c])))

    def run_iteration(self) -> List[Tuple[List[int], float]]:
        paths = [self.build_path(ant) for ant in range(self.cfg.n_ants)]

        results = []
        for ant, path in enumerate(paths):
            cost = path_cost(path, self.state.D)
            self.trace.emit(AntScored(ant, tuple(path), cost))
            results.append((path, cost))

        self.update_pheromones(paths, [cost for _, cost in results])
        return results

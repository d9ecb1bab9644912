"""Trace events emitted while an iteration runs, and sinks that consume them.

The engine only builds events; turning them into text is the job of
``TextTraceWriter``. Any object with an ``emit(event)`` method can be used
as a sink.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, TextIO, Tuple

from . import labels
from .errors import IoFailure


@dataclass(frozen=True)
class AntStarted:
    ant: int
    start: int


@dataclass(frozen=True)
class CandidateScored:
    ant: int
    current: int
    candidate: int
    tau_alpha: float
    eta_beta: float
    weight: float


@dataclass(frozen=True)
class WeightsSummed:
    ant: int
    current: int
    total: float


@dataclass(frozen=True)
class CandidateProbability:
    ant: int
    current: int
    candidate: int
    probability: float


@dataclass(frozen=True)
class RandomDrawn:
    ant: int
    value: float


@dataclass(frozen=True)
class CitySelected:
    ant: int
    city: int


@dataclass(frozen=True)
class PathCompleted:
    ant: int
    path: Tuple[int, ...]


@dataclass(frozen=True)
class AntScored:
    ant: int
    path: Tuple[int, ...]
    cost: float


@dataclass(frozen=True)
class EdgeUpdated:
    row: int
    col: int
    evaporated: float
    deposits: Tuple[float, ...]   # one entry per ant, 0.0 when the ant skipped the edge
    value: float


class TraceRecorder:
    """Keeps every event in memory."""

    def __init__(self):
        self.events: List[object] = []

    def emit(self, event) -> None:
        self.events.append(event)

    def of_type(self, kind) -> list:
        return [e for e in self.events if isinstance(e, kind)]


class TextTraceWriter:
    """Renders events as human-readable lines on an append-only text stream.

    A failing stream aborts the caller with ``IoFailure``.
    """

    def __init__(self, stream: TextIO, formatter=labels):
        self.stream = stream
        self.fmt = formatter

    def emit(self, event) -> None:
        text = self.render(event)
        try:
            self.stream.write(text)
        except (OSError, ValueError) as exc:
            raise IoFailure(f"trace sink rejected write: {exc}") from exc

    def render(self, event) -> str:
        label = self.fmt.city_label
        if isinstance(event, AntStarted):
            return f"Ant {event.ant + 1}\nStart city: {label(event.start)}\n"
        if isinstance(event, CandidateScored):
            return (f"{label(event.current)} -> {label(event.candidate)}: "
                    f"tau^alpha = {event.tau_alpha}, eta^beta = {event.eta_beta}, "
                    f"(tau^alpha) * (eta^beta) = {event.weight}\n")
        if isinstance(event, WeightsSummed):
            return f"Sum: {event.total}\n"
        if isinstance(event, CandidateProbability):
            return f"{label(event.current)} -> {label(event.candidate)}: prob = {event.probability}\n"
        if isinstance(event, RandomDrawn):
            return f"Random number: {event.value}\n"
        if isinstance(event, CitySelected):
            return f"Next city: {label(event.city)}\n\n"
        if isinstance(event, PathCompleted):
            return f"Path of ant {event.ant + 1}: {self.fmt.display_path(event.path)}\n---\n\n"
        if isinstance(event, AntScored):
            return f"Ant {event.ant + 1}: {self.fmt.display_path(event.path)} (cost: {event.cost})\n"
        if isinstance(event, EdgeUpdated):
            deposits = "".join(f"+ {d} " for d in event.deposits)
            return (f"{label(event.row)} -> {label(event.col)}: pheromone = {event.evaporated} "
                    f"{deposits}= {event.value}\n")
        raise TypeError(f"unknown trace event {event!r}")

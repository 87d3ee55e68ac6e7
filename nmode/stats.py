"""Summary statistics of one generation of a population."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


def _last_hidden_count(individual: Any) -> int:
    """Hidden-node count of the individual's last module, or 0 without modules."""
    count = 0
    for module in individual.modules:
        count = len(module.hidden_nodes)
    return count


@dataclass(frozen=True)
class Stats:
    """Best, average and spread of fitness, hidden units and edges.

    Individuals handed to :meth:`from_individuals` expose ``fitness`` and
    ``modules``; each module exposes ``hidden_nodes`` and ``edges``.
    """

    best_fitness: float
    avg_fitness: float
    sd_fitness: float
    best_hidden: float
    avg_hidden: float
    sd_hidden: float
    best_edges: float
    avg_edges: float
    sd_edges: float

    @classmethod
    def from_values(
        cls,
        best_fitness: float,
        avg_fitness: float,
        sd_fitness: float,
        best_hidden: float,
        avg_hidden: float,
        sd_hidden: float,
        best_edges: float,
        avg_edges: float,
        sd_edges: float,
    ) -> Stats:
        """Build statistics from values computed elsewhere."""
        return cls(
            float(best_fitness),
            float(avg_fitness),
            float(sd_fitness),
            float(best_hidden),
            float(avg_hidden),
            float(sd_hidden),
            float(best_edges),
            float(avg_edges),
            float(sd_edges),
        )

    @classmethod
    def from_individuals(cls, individuals: Sequence[Any]) -> Stats:
        """Compute statistics of a population sorted best first."""
        if not individuals:
            raise ValueError("statistics need at least one individual")
        count = len(individuals)

        best_fitness = float(individuals[0].fitness)
        avg_fitness = sum(i.fitness for i in individuals) / count
        sd_fitness = math.sqrt(sum((avg_fitness - i.fitness) ** 2 for i in individuals))

        best_hidden = float(_last_hidden_count(individuals[0]))
        avg_hidden = (
            sum(len(m.hidden_nodes) for i in individuals for m in i.modules) / count
        )
        sd_hidden_sum = 0.0
        for individual in individuals:
            module_count = len(list(individual.modules))
            last = _last_hidden_count(individual)
            per_module = last / module_count if module_count else math.nan
            sd_hidden_sum += (per_module - avg_hidden) ** 2
        sd_hidden = math.sqrt(sd_hidden_sum)

        best_edges = float(sum(len(m.edges) for m in individuals[0].modules))
        avg_edges = sum(len(m.edges) for i in individuals for m in i.modules) / count
        # The spread of edges is measured against the last module's hidden count.
        sd_edges = math.sqrt(
            sum((_last_hidden_count(i) - avg_edges) ** 2 for i in individuals)
        )

        return cls(
            best_fitness,
            avg_fitness,
            sd_fitness,
            best_hidden,
            avg_hidden,
            sd_hidden,
            best_edges,
            avg_edges,
            sd_edges,
        )

    @property
    def min_sd_fitness(self) -> float:
        return self.avg_fitness - self.sd_fitness

    @property
    def max_sd_fitness(self) -> float:
        return self.avg_fitness + self.sd_fitness

    @property
    def min_sd_hidden(self) -> float:
        return self.avg_hidden - self.sd_hidden

    @property
    def max_sd_hidden(self) -> float:
        return self.avg_hidden + self.sd_hidden

    @property
    def min_sd_edges(self) -> float:
        return self.avg_edges - self.sd_edges

    @property
    def max_sd_edges(self) -> float:
        return self.avg_edges + self.sd_edges
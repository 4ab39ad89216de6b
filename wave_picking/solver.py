# -*- coding: utf-8 -*-
# ARQUIVO: solver.py

import logging
from typing import Mapping, Optional, Sequence

from .evaluation import compute_objective, is_feasible
from .model import Instance, Selection
from .wave_builder import GreedyWaveBuilder, WaveBuilder

logger = logging.getLogger(__name__)

MAX_RUNTIME_SEC = 600  # 10 minutos


class ChallengeSolver:
    """
    Ponto de entrada do núcleo: monta a wave e expõe os verificadores.

    Os dados da instância não mudam durante a vida do objeto. O tempo é medido
    por um cronômetro externo (qualquer objeto com `get_time()` em segundos).
    """

    def __init__(self, orders: Sequence[Mapping[int, int]], aisles: Sequence[Mapping[int, int]],
                 n_items: int, wave_size_lb: int, wave_size_ub: int,
                 builder: Optional[WaveBuilder] = None, max_runtime_sec: int = MAX_RUNTIME_SEC):
        instance = Instance.from_mappings(orders, aisles, n_items, wave_size_lb, wave_size_ub)
        self._setup(instance, builder, max_runtime_sec)

    @classmethod
    def from_instance(cls, instance: Instance, builder: Optional[WaveBuilder] = None,
                      max_runtime_sec: int = MAX_RUNTIME_SEC) -> 'ChallengeSolver':
        solver = cls.__new__(cls)
        solver._setup(instance.copy(), builder, max_runtime_sec)
        return solver

    def _setup(self, instance: Instance, builder: Optional[WaveBuilder], max_runtime_sec: int):
        instance.validate()
        self.instance = instance
        self.builder = builder or GreedyWaveBuilder()
        self.max_runtime_sec = max_runtime_sec

    def solve(self, stopwatch) -> Optional[Selection]:
        """
        Executa uma passada do construtor de wave.

        Returns:
            Selection ou None quando nenhuma wave atinge o limite inferior.
        """
        logger.info("Construindo wave: %d pedidos, %d corredores, limites [%d, %d].",
                    len(self.instance.orders), len(self.instance.aisles),
                    self.instance.min_wave_size, self.instance.max_wave_size)
        selection = self.builder.build(self.instance)
        logger.info("Construção finalizada. Tempo restante: %ds.", self.get_remaining_time(stopwatch))
        return selection

    def get_remaining_time(self, stopwatch) -> int:
        """
        Segundos inteiros que ainda restam do orçamento, nunca negativo.
        """
        return max(int(self.max_runtime_sec - stopwatch.get_time()), 0)

    def is_solution_feasible(self, selection: Optional[Selection]) -> bool:
        return is_feasible(self.instance, selection)

    def compute_objective_function(self, selection: Optional[Selection]) -> float:
        return compute_objective(self.instance, selection)

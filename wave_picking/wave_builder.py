# -*- coding: utf-8 -*-
# ARQUIVO: wave_builder.py

import logging
from collections import Counter
from typing import Callable, List, Optional, Set

from .coverage import CoverageStrategy, SingleAisleCoverage
from .model import Instance, Order, Selection

logger = logging.getLogger(__name__)


class WaveBuilder:
    """
    Interface para quem monta uma wave candidata a partir de uma instância.
    Retorna None quando não encontra wave que atinja o tamanho mínimo.
    """

    def build(self, instance: Instance) -> Optional[Selection]:
        raise NotImplementedError


class GreedyWaveBuilder(WaveBuilder):
    """
    Passada única e gulosa sobre os pedidos, na ordem do catálogo.

    1. Pula o pedido se ele estourar o limite superior (UB).
    2. Caso contrário, adiciona o pedido e todos os corredores que a estratégia
       de cobertura indicar para ele.
    3. Para assim que o total de unidades cai dentro de [LB, UB].

    Cada corredor guarda quantos pedidos selecionados dependem dele. Desfazer
    um pedido só remove os corredores cuja contagem chega a zero.

    `coverage` é a classe (ou fábrica) da estratégia de cobertura; ela é
    instanciada a cada `build` com a instância recebida.
    """

    def __init__(self, coverage: Callable[[Instance], CoverageStrategy] = SingleAisleCoverage):
        self.coverage = coverage

    def build(self, instance: Instance) -> Optional[Selection]:
        coverage = self.coverage(instance)

        selected_orders: Set[int] = set()
        aisle_refs: Counter = Counter()
        total_units_picked = 0

        for order in instance.orders:
            order_total = order.total_units

            if total_units_picked + order_total > instance.max_wave_size:
                logger.debug("Pedido %d (%d unidades) pulado: excederia UB=%d.",
                             order.id, order_total, instance.max_wave_size)
                continue

            selected_orders.add(order.id)
            total_units_picked += order_total

            aisles_for_order = coverage.find_aisles_for_order(order)
            aisle_refs.update(aisles_for_order)
            logger.debug("Pedido %d aceito com %d corredores compatíveis.", order.id, len(aisles_for_order))

            if total_units_picked > instance.max_wave_size:
                total_units_picked -= self._undo_order(order, aisles_for_order, selected_orders, aisle_refs)

            if instance.min_wave_size <= total_units_picked <= instance.max_wave_size:
                break

        if total_units_picked < instance.min_wave_size:
            logger.warning("A wave não atinge o limite inferior: %d unidades < LB=%d.",
                           total_units_picked, instance.min_wave_size)
            return None

        selection = Selection.of(selected_orders, +aisle_refs)
        logger.info("Wave gulosa: %d pedidos, %d unidades, %d corredores.",
                    len(selection.orders), total_units_picked, len(selection.aisles))
        return selection

    @staticmethod
    def _undo_order(order: Order, aisles_for_order: List[int], selected_orders: Set[int],
                    aisle_refs: Counter) -> int:
        selected_orders.discard(order.id)
        aisle_refs.subtract(aisles_for_order)
        return order.total_units

# -*- coding: utf-8 -*-
# ARQUIVO: coverage.py

from typing import Dict, Iterable, List

from .model import Aisle, Instance, Order


class CoverageStrategy:
    """
    Decide quais corredores podem atender um pedido.

    O construtor da wave só conversa com esta interface, então a regra de
    cobertura pode ser trocada sem mexer no laço guloso.
    """

    def __init__(self, instance: Instance):
        self.instance = instance

    def find_aisles_for_order(self, order: Order) -> List[int]:
        raise NotImplementedError

    def covers(self, order: Order, aisle_ids: Iterable[int]) -> bool:
        """
        Verifica se o conjunto de corredores, somado, tem estoque para o pedido inteiro.
        """
        supply: Dict[int, int] = {}
        for aisle_id in aisle_ids:
            for item_id, quantity in self.instance.aisles[aisle_id].inventory.items():
                supply[item_id] = supply.get(item_id, 0) + quantity
        return all(supply.get(item_id, 0) >= quantity for item_id, quantity in order.items.items())


class SingleAisleCoverage(CoverageStrategy):
    """
    Um corredor só é candidato se, sozinho, tiver estoque suficiente de todos
    os itens do pedido. Não há crédito parcial.
    """

    def find_aisles_for_order(self, order: Order) -> List[int]:
        return [aisle.id for aisle in self.instance.aisles if self.is_aisle_compatible(aisle, order)]

    @staticmethod
    def is_aisle_compatible(aisle: Aisle, order: Order) -> bool:
        for item_id, required_quantity in order.items.items():
            if aisle.inventory.get(item_id, 0) < required_quantity:
                return False
        return True


class MultiAisleCoverage(CoverageStrategy):
    """
    Combina vários corredores para cobrir um pedido quando nenhum basta sozinho.

    Heurística gulosa: a cada passo escolhe o corredor que mais reduz a demanda
    restante (empate pelo menor índice). Retorna lista vazia se nem o catálogo
    inteiro cobre o pedido.
    """

    def find_aisles_for_order(self, order: Order) -> List[int]:
        remaining = dict(order.items)
        candidates = set()
        for item_id in remaining:
            candidates.update(self.instance.item_locations.get(item_id, []))

        chosen: List[int] = []
        while remaining:
            best_aisle, best_gain = None, 0
            for aisle_id in sorted(candidates):
                gain = self._gain(self.instance.aisles[aisle_id], remaining)
                if gain > best_gain:
                    best_aisle, best_gain = aisle_id, gain
            if best_aisle is None:
                return []

            chosen.append(best_aisle)
            candidates.discard(best_aisle)
            for item_id, quantity in self.instance.aisles[best_aisle].inventory.items():
                if item_id in remaining:
                    remaining[item_id] -= quantity
                    if remaining[item_id] <= 0:
                        del remaining[item_id]

        return sorted(chosen)

    @staticmethod
    def _gain(aisle: Aisle, remaining: Dict[int, int]) -> int:
        return sum(min(aisle.inventory.get(item_id, 0), quantity) for item_id, quantity in remaining.items())

# -*- coding: utf-8 -*-
# ARQUIVO: evaluation.py
# DESCRIÇÃO: Verificação de viabilidade e função objetivo de uma wave,
#            independentes de como a wave foi construída.

from dataclasses import dataclass
from typing import Dict, Optional

from .model import Instance, Selection


@dataclass(frozen=True)
class FeasibilityReport:
    feasible: bool
    message: str
    total_units: int = 0
    num_aisles: int = 0


def _references_known_ids(instance: Instance, selection: Selection) -> bool:
    return all(0 <= o < len(instance.orders) for o in selection.orders) \
        and all(0 <= a < len(instance.aisles) for a in selection.aisles)


def _units_picked(instance: Instance, selection: Selection) -> Dict[int, int]:
    picked: Dict[int, int] = {}
    for order_id in selection.orders:
        for item_id, quantity in instance.orders[order_id].items.items():
            picked[item_id] = picked.get(item_id, 0) + quantity
    return picked


def _units_available(instance: Instance, selection: Selection) -> Dict[int, int]:
    available: Dict[int, int] = {}
    for aisle_id in selection.aisles:
        for item_id, quantity in instance.aisles[aisle_id].inventory.items():
            available[item_id] = available.get(item_id, 0) + quantity
    return available


def feasibility_report(instance: Instance, selection: Optional[Selection]) -> FeasibilityReport:
    """
    Confere a wave contra as restrições do problema e descreve a primeira violação.

    Returns:
        FeasibilityReport: `feasible` indica se todas as restrições foram cumpridas.
    """
    if selection is None or selection.is_empty():
        return FeasibilityReport(False, "Wave vazia: sem pedidos ou sem corredores.")

    if not _references_known_ids(instance, selection):
        return FeasibilityReport(False, "A wave referencia pedidos ou corredores inexistentes.")

    picked = _units_picked(instance, selection)
    available = _units_available(instance, selection)
    total_units = sum(picked.values())
    num_aisles = len(selection.aisles)

    if total_units < instance.min_wave_size or total_units > instance.max_wave_size:
        return FeasibilityReport(
            False,
            f"Total de unidades {total_units} fora de [{instance.min_wave_size}, {instance.max_wave_size}].",
            total_units, num_aisles)

    for item_id in sorted(picked):
        if picked[item_id] > available.get(item_id, 0):
            return FeasibilityReport(
                False,
                f"Item {item_id}: demanda {picked[item_id]} > estoque {available.get(item_id, 0)}.",
                total_units, num_aisles)

    return FeasibilityReport(True, "Wave viável.", total_units, num_aisles)


def is_feasible(instance: Instance, selection: Optional[Selection]) -> bool:
    return feasibility_report(instance, selection).feasible


def compute_objective(instance: Instance, selection: Optional[Selection]) -> float:
    """
    Densidade de coleta: unidades dos pedidos selecionados por corredor visitado.
    """
    if selection is None or selection.is_empty() or not _references_known_ids(instance, selection):
        return 0.0
    total_units_picked = sum(instance.orders[order_id].total_units for order_id in selection.orders)
    return total_units_picked / len(selection.aisles)

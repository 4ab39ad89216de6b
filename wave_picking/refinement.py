# -*- coding: utf-8 -*-
# ARQUIVO: refinement.py
# DESCRIÇÃO: Melhoria da wave gulosa pelo Algoritmo de Dinkelbach, com gestão
#            de tempo adaptativa ("Momentum") por iteração.

import logging
from typing import Optional, Tuple
import time

import gurobipy as gp
from gurobipy import GRB

from .evaluation import compute_objective, is_feasible
from .model import Instance, Selection

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 30
CONVERGENCE_TOL = 1e-6
BASE_ITER_TIME = 15.0
MOMENTUM_BONUS_FACTOR = 2.0
SIGNIFICANT_IMPROVEMENT = 1.10
SAFETY_MARGIN_SEC = 5.0


class WaveModel:
    """
    Modelo Gurobi fixo da wave: variáveis x (pedidos) e y (corredores), limites
    de tamanho e suficiência de estoque por item são criados uma única vez.
    Entre iterações só mudam o objetivo  Σ u_o x_o - R Σ y_a  e o warm start.
    """

    def __init__(self, instance: Instance):
        self.instance = instance
        self.model = gp.Model("wave_dinkelbach")
        self.model.setParam('OutputFlag', 0)
        self.model.setParam('MIPFocus', 1)

        self.x = self.model.addVars((order.id for order in instance.orders), vtype=GRB.BINARY, name="x")
        self.y = self.model.addVars((aisle.id for aisle in instance.aisles), vtype=GRB.BINARY, name="y")

        self.units = gp.quicksum(order.total_units * self.x[order.id] for order in instance.orders)
        self.model.addConstr(self.units >= instance.min_wave_size, "min_wave_size")
        self.model.addConstr(self.units <= instance.max_wave_size, "max_wave_size")

        for item_id in instance.orders_by_item:
            self.model.addConstr(self._demand(item_id) <= self._supply(item_id), f"inventory_sufficiency_{item_id}")
        self.model.update()

    def _demand(self, item_id: int) -> gp.LinExpr:
        orders = self.instance.orders
        return gp.quicksum(orders[o_id].items[item_id] * self.x[o_id]
                           for o_id in self.instance.orders_by_item[item_id])

    def _supply(self, item_id: int) -> gp.LinExpr:
        aisles = self.instance.aisles
        return gp.quicksum(aisles[a_id].inventory[item_id] * self.y[a_id]
                           for a_id in self.instance.item_locations.get(item_id, []))

    def solve(self, ratio_R: float, time_limit: float,
              warm_start: Optional[Selection]) -> Tuple[float, Optional[Selection], int]:
        """
        Resolve  max Σ u_o x_o - R Σ y_a  para o R dado.

        Returns:
            (F(R), wave encontrada ou None, status do Gurobi)
        """
        self.model.setObjective(self.units - ratio_R * self.y.sum(), GRB.MAXIMIZE)
        if warm_start is not None:
            for order_id, var in self.x.items():
                var.Start = 1.0 if order_id in warm_start.orders else 0.0
            for aisle_id, var in self.y.items():
                var.Start = 1.0 if aisle_id in warm_start.aisles else 0.0

        self.model.setParam('TimeLimit', max(time_limit, 1.0))
        self.model.optimize()

        if self.model.SolCount == 0:
            return -float('inf'), None, self.model.Status
        found = Selection.of((o for o, var in self.x.items() if var.X > 0.5),
                             (a for a, var in self.y.items() if var.X > 0.5))
        return self.model.ObjVal, found, self.model.Status

    def dispose(self):
        self.model.dispose()

    def __enter__(self) -> 'WaveModel':
        return self

    def __exit__(self, *exc_info):
        self.dispose()


class DinkelbachRefiner:
    """
    Maximiza unidades/corredores resolvendo uma sequência de subproblemas
    lineares com o R da melhor wave conhecida.

    Só devolve uma wave nova se ela for viável e estritamente melhor que a de
    partida; caso contrário devolve a wave recebida.
    """

    def __init__(self, instance: Instance, base_iter_time: float = BASE_ITER_TIME,
                 max_iterations: int = MAX_ITERATIONS):
        self.instance = instance
        self.base_iter_time = base_iter_time
        self.max_iterations = max_iterations

    def improve(self, selection: Optional[Selection], time_budget: float) -> Optional[Selection]:
        start_time = time.time()
        if time_budget <= SAFETY_MARGIN_SEC:
            logger.info("Sem tempo para o refinamento (%.1fs). Mantendo a wave gulosa.", time_budget)
            return selection
        logger.info("Iniciando refinamento Dinkelbach (orçamento de %.1fs).", time_budget)

        best = selection if is_feasible(self.instance, selection) else None
        if selection is not None and best is None:
            logger.warning("Wave inicial inviável; refinamento começa com ratio = 0.")
        current_R = compute_objective(self.instance, best)
        has_momentum = False

        with WaveModel(self.instance) as wave_model:
            for i in range(self.max_iterations):
                remaining_global_time = time_budget - (time.time() - start_time)
                if remaining_global_time <= SAFETY_MARGIN_SEC:
                    logger.info("Tempo limite global iminente. Finalizando.")
                    break

                iter_time_limit = self.base_iter_time
                if has_momentum:
                    iter_time_limit *= MOMENTUM_BONUS_FACTOR
                iter_time_limit = min(iter_time_limit, remaining_global_time - SAFETY_MARGIN_SEC)

                logger.info("Iteração %d (Ratio Atual = %.6f, Limite de Tempo = %.1fs)",
                            i + 1, current_R, iter_time_limit)

                F_R, candidate, status = wave_model.solve(current_R, iter_time_limit, best)

                if F_R <= CONVERGENCE_TOL and status == GRB.OPTIMAL:
                    logger.info("Convergência provada. F(R) = %.6f <= %g.", F_R, CONVERGENCE_TOL)
                    break

                if candidate is None or not candidate.aisles:
                    logger.info("Subproblema não encontrou solução viável. Finalizando.")
                    break

                new_R = compute_objective(self.instance, candidate)
                if new_R > current_R + CONVERGENCE_TOL and is_feasible(self.instance, candidate):
                    logger.info("Solução melhorada encontrada. Novo Ratio = %.6f", new_R)
                    has_momentum = current_R > 0 and new_R >= current_R * SIGNIFICANT_IMPROVEMENT
                    best = candidate
                    current_R = new_R
                else:
                    logger.info("Nenhuma melhoria significativa encontrada. Finalizando.")
                    break

        if best is None:
            return selection
        return best

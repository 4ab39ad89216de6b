# -*- coding: utf-8 -*-
# ARQUIVO: main.py

"""Seleciona uma wave de pedidos e corredores para uma instância do desafio."""

import argparse
import logging
import sys
from typing import List, Optional

import gurobipy as gp

from .coverage import MultiAisleCoverage, SingleAisleCoverage
from .data_parser import InstanceParser
from .evaluation import compute_objective, feasibility_report
from .output import read_solution_file, write_solution_file
from .refinement import DinkelbachRefiner
from .solver import MAX_RUNTIME_SEC, ChallengeSolver
from .timing import Stopwatch
from .wave_builder import GreedyWaveBuilder

logger = logging.getLogger(__name__)

COVERAGE_STRATEGIES = {
    'single': SingleAisleCoverage,
    'multi': MultiAisleCoverage,
}


class StreamToLogger:
    """
    Redireciona um fluxo (como sys.stdout ou sys.stderr) para um logger.
    """
    def __init__(self, logger, level):
        self.logger = logger
        self.level = level

    def write(self, buf):
        for line in buf.rstrip().splitlines():
            self.logger.log(self.level, line.rstrip())

    def flush(self):
        pass


class ConsoleHandler(logging.StreamHandler):
    """Handler de console instalado por `configure_logging` (um só por processo)."""


def configure_logging(log_file: str, level: int = logging.INFO):
    """
    Log em arquivo e no console; o stdout (inclusive a saída do Gurobi) vai para o logger.
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        filename=log_file,
        filemode='w'
    )

    root = logging.getLogger()
    if not any(isinstance(h, ConsoleHandler) for h in root.handlers):
        console_handler = ConsoleHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter('%(asctime)s - %(message)s'))
        root.addHandler(console_handler)

    sys.stdout = StreamToLogger(logging.getLogger('STDOUT'), logging.INFO)


def run_challenge(input_file: str, output_file: Optional[str], time_limit: int = MAX_RUNTIME_SEC,
                  coverage: str = 'single', refine: bool = False) -> bool:
    """
    Orquestra a execução do desafio.

    1. Faz o parsing da instância.
    2. Constrói a wave gulosa (e, opcionalmente, a refina com Dinkelbach).
    3. Verifica, avalia e salva a solução.

    Returns:
        bool: True se uma wave foi encontrada.
    """
    stopwatch = Stopwatch().start()
    instance = InstanceParser.parse(input_file)

    builder = GreedyWaveBuilder(COVERAGE_STRATEGIES[coverage])
    solver = ChallengeSolver.from_instance(instance, builder=builder, max_runtime_sec=time_limit)
    selection = solver.solve(stopwatch)

    if refine:
        refiner = DinkelbachRefiner(instance)
        selection = refiner.improve(selection, solver.get_remaining_time(stopwatch))

    if selection is None:
        logger.warning("Nenhuma solução encontrada para '%s'.", input_file)
        return False

    report = feasibility_report(instance, selection)
    if report.feasible:
        logger.info("Wave viável.")
    else:
        logger.warning("Wave inviável: %s", report.message)
    logger.info("Valor da Função Objetivo (Densidade): %.4f", solver.compute_objective_function(selection))
    logger.info("Total de Pedidos na Wave: %d", len(selection.orders))
    logger.info("Total de Corredores Visitados: %d", len(selection.aisles))

    if output_file:
        write_solution_file(selection, output_file)
    return True


def check_solution(input_file: str, solution_file: str) -> bool:
    instance = InstanceParser.parse(input_file)
    selection = read_solution_file(solution_file)
    report = feasibility_report(instance, selection)

    logger.info("%s", report.message)
    if report.feasible:
        logger.info("Densidade: %.4f (%d unidades em %d corredores)",
                    compute_objective(instance, selection), report.total_units, report.num_aisles)
    return report.feasible


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input_file", help="Arquivo da instância.")
    parser.add_argument("output_file", nargs="?", default=None, help="Arquivo onde a wave será salva.")
    parser.add_argument("--time-limit", type=int, default=MAX_RUNTIME_SEC,
                        help="Orçamento total em segundos (padrão: 600).")
    parser.add_argument("--coverage", choices=sorted(COVERAGE_STRATEGIES), default='single',
                        help="Regra de cobertura dos pedidos pelos corredores.")
    parser.add_argument("--refine", action="store_true",
                        help="Refina a wave gulosa com o algoritmo de Dinkelbach (Gurobi).")
    parser.add_argument("--check", metavar="SOLUTION",
                        help="Apenas verifica e avalia um arquivo de solução existente.")
    parser.add_argument("--log-file", default="wave_picking.log", help="Arquivo de log.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    original_stdout = sys.stdout
    configure_logging(args.log_file)

    logger.info("--- INICIANDO DESAFIO DE OTIMIZAÇÃO DE WAVE ---")
    try:
        if args.check:
            ok = check_solution(args.input_file, args.check)
        else:
            ok = run_challenge(args.input_file, args.output_file, args.time_limit, args.coverage, args.refine)
    except (FileNotFoundError, ValueError) as e:
        logger.error("ERRO DE ARQUIVO/DADOS: %s", e)
        return 1
    except gp.GurobiError as e:
        logger.error("ERRO DO GUROBI: %s - %s", e.errno, e.message)
        return 1
    finally:
        logger.info("--- EXECUÇÃO FINALIZADA ---")
        sys.stdout = original_stdout

    return 0 if ok else 2


if __name__ == '__main__':
    sys.exit(main())

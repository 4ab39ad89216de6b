"""
Seleção de waves de coleta: escolhe pedidos e corredores de forma que o total
de unidades fique entre os limites da wave, todo item seja atendido pelos
corredores visitados e a densidade (unidades por corredor) seja alta.
"""

from .coverage import CoverageStrategy, MultiAisleCoverage, SingleAisleCoverage
from .evaluation import compute_objective, feasibility_report, is_feasible
from .model import Aisle, Instance, InvalidInstanceError, Order, Selection
from .solver import ChallengeSolver
from .timing import Stopwatch
from .wave_builder import GreedyWaveBuilder, WaveBuilder

__all__ = [
    'Aisle',
    'ChallengeSolver',
    'CoverageStrategy',
    'GreedyWaveBuilder',
    'Instance',
    'InvalidInstanceError',
    'MultiAisleCoverage',
    'Order',
    'Selection',
    'SingleAisleCoverage',
    'Stopwatch',
    'WaveBuilder',
    'compute_objective',
    'feasibility_report',
    'is_feasible',
]

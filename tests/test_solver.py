import pytest

from wave_picking.coverage import MultiAisleCoverage, SingleAisleCoverage
from wave_picking.model import Instance, InvalidInstanceError, Selection
from wave_picking.solver import ChallengeSolver
from wave_picking.timing import Stopwatch
from wave_picking.wave_builder import GreedyWaveBuilder


class FakeStopwatch:
    def __init__(self, elapsed):
        self.elapsed = elapsed

    def get_time(self):
        return self.elapsed


def test_exact_fit_scenario():
    solver = ChallengeSolver([{0: 5}], [{0: 10}], n_items=1, wave_size_lb=5, wave_size_ub=5)
    selection = solver.solve(FakeStopwatch(0))

    assert selection == Selection.of([0], [0])
    assert solver.is_solution_feasible(selection)
    assert solver.compute_objective_function(selection) == 5.0


def test_unreachable_lower_bound_scenario():
    solver = ChallengeSolver([{0: 3}], [{1: 2}], n_items=2, wave_size_lb=10, wave_size_ub=20)
    selection = solver.solve(FakeStopwatch(0))

    assert selection is None
    assert not solver.is_solution_feasible(selection)
    assert solver.compute_objective_function(selection) == 0.0


def test_repeated_solves_return_the_same_selection():
    solver = ChallengeSolver(
        [{0: 2}, {1: 3}, {0: 1, 1: 1}],
        [{0: 5}, {1: 5}, {0: 1, 1: 3}],
        n_items=2, wave_size_lb=4, wave_size_ub=6,
    )
    stopwatch = FakeStopwatch(1)
    assert solver.solve(stopwatch) == solver.solve(stopwatch)


@pytest.mark.parametrize("elapsed, expected", [
    (0, 600),
    (0.4, 599),
    (120.0, 480),
    (599.9, 0),
    (900, 0),
])
def test_remaining_time(elapsed, expected):
    solver = ChallengeSolver([{0: 1}], [{0: 1}], n_items=1, wave_size_lb=1, wave_size_ub=1)
    assert solver.get_remaining_time(FakeStopwatch(elapsed)) == expected


def test_remaining_time_with_custom_budget():
    solver = ChallengeSolver([{0: 1}], [{0: 1}], n_items=1, wave_size_lb=1, wave_size_ub=1,
                             max_runtime_sec=30)
    assert solver.get_remaining_time(FakeStopwatch(10)) == 20


def test_stopwatch_drives_remaining_time():
    solver = ChallengeSolver([{0: 1}], [{0: 1}], n_items=1, wave_size_lb=1, wave_size_ub=1)
    assert solver.get_remaining_time(Stopwatch()) == 600
    assert 0 < solver.get_remaining_time(Stopwatch().start()) <= 600


def test_validates_external_selection():
    solver = ChallengeSolver([{0: 4}, {0: 4}], [{0: 5}, {0: 5}], n_items=1, wave_size_lb=8, wave_size_ub=8)
    assert solver.is_solution_feasible(Selection.of([0, 1], [0, 1]))
    assert not solver.is_solution_feasible(Selection.of([0, 1], [0]))
    assert solver.compute_objective_function(Selection.of([0, 1], [0, 1])) == 4.0


@pytest.mark.parametrize("orders, aisles, lb, ub", [
    ([{0: 1}], [{0: 1}], 5, 2),
    ([{0: 0}], [{0: 1}], 0, 2),
    ([{0: 1}], [{0: -1}], 0, 2),
    ([{3: 1}], [{0: 1}], 0, 2),
])
def test_rejects_invalid_input(orders, aisles, lb, ub):
    with pytest.raises(InvalidInstanceError):
        ChallengeSolver(orders, aisles, n_items=2, wave_size_lb=lb, wave_size_ub=ub)


def test_from_instance_builds_reverse_indexes():
    instance = Instance(num_items=1, min_wave_size=1, max_wave_size=1)
    instance.orders.extend(Instance.from_mappings([{0: 1}], [], 1, 0, 1).orders)
    instance.aisles.extend(Instance.from_mappings([], [{0: 2}], 1, 0, 1).aisles)

    solver = ChallengeSolver.from_instance(instance)

    assert solver.instance.item_locations == {0: [0]}
    assert solver.solve(FakeStopwatch(0)) == Selection.of([0], [0])


def test_injected_builder_uses_the_solver_instance():
    builder = GreedyWaveBuilder(SingleAisleCoverage)
    GreedyWaveBuilder(SingleAisleCoverage).build(
        Instance.from_mappings([{1: 1}], [{1: 7}, {1: 7}], num_items=2, min_wave_size=0, max_wave_size=9))

    solver = ChallengeSolver([{0: 5}], [{0: 10}], n_items=1, wave_size_lb=5, wave_size_ub=5, builder=builder)

    assert solver.solve(FakeStopwatch(0)) == Selection.of([0], [0])


def test_injected_multi_aisle_builder():
    solver = ChallengeSolver([{0: 5}], [{0: 2}, {0: 3}], n_items=1, wave_size_lb=5, wave_size_ub=5,
                             builder=GreedyWaveBuilder(MultiAisleCoverage))
    selection = solver.solve(FakeStopwatch(0))

    assert selection == Selection.of([0], [0, 1])
    assert solver.is_solution_feasible(selection)


def test_from_instance_leaves_caller_instance_untouched():
    instance = Instance(num_items=1, min_wave_size=1, max_wave_size=1)
    instance.orders.extend(Instance.from_mappings([{0: 1}], [], 1, 0, 1).orders)
    instance.aisles.extend(Instance.from_mappings([], [{0: 2}], 1, 0, 1).aisles)

    solver = ChallengeSolver.from_instance(instance)

    assert instance.item_locations == {}
    assert instance.orders_by_item == {}
    assert solver.instance.item_locations == {0: [0]}
    assert solver.instance.orders == instance.orders

from wave_picking.evaluation import compute_objective, is_feasible
from wave_picking.model import Instance, Selection
from wave_picking.refinement import DinkelbachRefiner, WaveModel
from wave_picking.wave_builder import GreedyWaveBuilder


def _instance():
    # a2 guarda os dois itens; o guloso para no primeiro pedido com dois corredores.
    return Instance.from_mappings(
        orders=[{0: 5}, {1: 5}],
        aisles=[{0: 5}, {1: 5}, {0: 5, 1: 5}],
        num_items=2, min_wave_size=5, max_wave_size=10,
    )


def test_refiner_improves_greedy_wave():
    instance = _instance()
    greedy = GreedyWaveBuilder().build(instance)
    assert greedy == Selection.of([0], [0, 2])
    assert compute_objective(instance, greedy) == 2.5

    refined = DinkelbachRefiner(instance).improve(greedy, time_budget=60)

    assert refined == Selection.of([0, 1], [2])
    assert is_feasible(instance, refined)
    assert compute_objective(instance, refined) == 10.0


def test_refiner_starts_from_scratch_without_a_wave():
    instance = _instance()
    refined = DinkelbachRefiner(instance).improve(None, time_budget=60)
    assert is_feasible(instance, refined)
    assert compute_objective(instance, refined) == 10.0


def test_refiner_keeps_wave_when_budget_is_exhausted():
    instance = _instance()
    greedy = Selection.of([0], [0, 2])
    assert DinkelbachRefiner(instance).improve(greedy, time_budget=1) == greedy


def test_refiner_returns_none_when_nothing_is_feasible():
    instance = Instance.from_mappings([{0: 3}], [{1: 4}], num_items=2, min_wave_size=3, max_wave_size=3)
    assert DinkelbachRefiner(instance).improve(None, time_budget=60) is None


def test_wave_model_is_reused_across_ratios():
    instance = _instance()
    with WaveModel(instance) as wave_model:
        F_zero, wave, _ = wave_model.solve(0.0, 10, None)
        assert F_zero == 10.0
        assert is_feasible(instance, wave)

        F_best, wave, _ = wave_model.solve(10.0, 10, Selection.of([0], [0, 2]))
        assert abs(F_best) <= 1e-6
        assert compute_objective(instance, wave) == 10.0
        assert wave_model.model.NumConstrs == 4

import math

import pytest

from fourierfun.model.errors import CapacityExceeded, InvalidArgument, NotReady
from fourierfun.model.series import SeriesSpec, SeriesStage, SineComponent


@pytest.mark.parametrize("n", [0, 1, 3, 10])
def test_declared_count_filled_in_call_order(n):
    spec = SeriesSpec()
    spec.declare_count(n)
    for i in range(n):
        spec.add_component(float(i) - 1.0, float(i))

    assert spec.is_complete()
    assert spec.components() == tuple(SineComponent(float(i) - 1.0, float(i)) for i in range(n))


def test_new_spec_is_idle_and_not_complete():
    spec = SeriesSpec()
    assert spec.stage is SeriesStage.IDLE
    assert not spec.is_complete()
    assert spec.declared_count is None
    with pytest.raises(NotReady):
        spec.components()


def test_add_while_idle_exceeds_capacity():
    spec = SeriesSpec()
    with pytest.raises(CapacityExceeded):
        spec.add_component(1.0, 1.0)
    assert len(spec) == 0


def test_stage_transitions():
    spec = SeriesSpec()
    spec.declare_count(2)
    assert spec.stage is SeriesStage.COUNT_DECLARED
    spec.add_component(1.0, 2.0)
    assert spec.stage is SeriesStage.COLLECTING
    assert spec.remaining == 1
    spec.add_component(0.5, 4.0)
    assert spec.stage is SeriesStage.READY
    spec.mark_evaluated()
    assert spec.stage is SeriesStage.EVALUATED


def test_declare_zero_is_immediately_ready():
    spec = SeriesSpec()
    spec.declare_count(0)
    assert spec.stage is SeriesStage.READY
    assert spec.components() == ()


@pytest.mark.parametrize("bad", [-1, -10])
def test_negative_count_rejected(bad):
    spec = SeriesSpec()
    with pytest.raises(InvalidArgument):
        spec.declare_count(bad)
    assert spec.stage is SeriesStage.IDLE


@pytest.mark.parametrize("bad", [1.5, "3", True, None])
def test_non_integer_count_rejected(bad):
    with pytest.raises(InvalidArgument):
        SeriesSpec().declare_count(bad)


def test_failed_declare_keeps_previous_session():
    spec = SeriesSpec()
    spec.declare_count(2)
    spec.add_component(1.0, 1.0)
    with pytest.raises(InvalidArgument):
        spec.declare_count(-1)
    assert spec.declared_count == 2
    assert spec.collected() == (SineComponent(1.0, 1.0),)


def test_add_beyond_capacity_leaves_sequence_unchanged():
    spec = SeriesSpec()
    spec.declare_count(2)
    spec.add_component(1.0, 1.0)
    spec.add_component(2.0, 3.0)
    before = spec.components()

    with pytest.raises(CapacityExceeded):
        spec.add_component(5.0, 5.0)

    assert spec.components() == before
    assert spec.stage is SeriesStage.READY


def test_add_after_evaluation_exceeds_capacity(unit_sine):
    unit_sine.mark_evaluated()
    with pytest.raises(CapacityExceeded):
        unit_sine.add_component(1.0, 1.0)
    assert unit_sine.stage is SeriesStage.EVALUATED


def test_capacity_checked_before_arguments(unit_sine):
    with pytest.raises(CapacityExceeded):
        unit_sine.add_component(1.0, -1.0)


def test_negative_frequency_rejected_without_mutation():
    spec = SeriesSpec()
    spec.declare_count(2)
    with pytest.raises(InvalidArgument):
        spec.add_component(1.0, -0.5)
    assert len(spec) == 0
    assert spec.stage is SeriesStage.COUNT_DECLARED


@pytest.mark.parametrize("amplitude", [-3.0, 0.0, 0, 7])
def test_any_finite_amplitude_accepted(amplitude):
    spec = SeriesSpec()
    spec.declare_count(1)
    component = spec.add_component(amplitude, 0.0)
    assert component.amplitude == float(amplitude)
    assert isinstance(component.amplitude, float)


@pytest.mark.parametrize(
    "amplitude, frequency, phase",
    [
        (math.nan, 1.0, 0.0),
        (math.inf, 1.0, 0.0),
        (1.0, math.inf, 0.0),
        (1.0, 1.0, math.nan),
        ("1", 1.0, 0.0),
        (1.0, None, 0.0),
        (10**400, 1.0, 0.0),
        (1.0, 1.0, -10**400),
    ],
)
def test_non_finite_or_non_numeric_inputs_rejected(amplitude, frequency, phase):
    spec = SeriesSpec()
    spec.declare_count(1)
    with pytest.raises(InvalidArgument):
        spec.add_component(amplitude, frequency, phase)
    assert len(spec) == 0


def test_redeclare_discards_components_from_any_stage(unit_sine):
    unit_sine.mark_evaluated()
    unit_sine.declare_count(3)
    assert len(unit_sine) == 0
    assert unit_sine.stage is SeriesStage.COUNT_DECLARED
    assert not unit_sine.is_complete()


def test_components_is_a_snapshot():
    spec = SeriesSpec()
    spec.declare_count(1)
    spec.add_component(1.0, 1.0)
    first = spec.components()
    spec.declare_count(1)
    spec.add_component(2.0, 2.0)
    assert first == (SineComponent(1.0, 1.0),)


def test_components_are_immutable(unit_sine):
    component = unit_sine.components()[0]
    with pytest.raises(AttributeError):
        component.amplitude = 2.0


def test_from_pairs_builds_complete_spec():
    spec = SeriesSpec.from_pairs([(1.0, 2.0), (0.5, 3.0, math.pi)])
    assert spec.is_complete()
    assert spec.components() == (
        SineComponent(1.0, 2.0, 0.0),
        SineComponent(0.5, 3.0, math.pi),
    )


def test_from_pairs_rejects_bad_shapes_and_values():
    with pytest.raises(InvalidArgument):
        SeriesSpec.from_pairs([(1.0,)])
    with pytest.raises(InvalidArgument):
        SeriesSpec.from_pairs([(1.0, -2.0)])
    with pytest.raises(InvalidArgument):
        SeriesSpec.from_pairs([1.0])
    with pytest.raises(InvalidArgument):
        SeriesSpec.from_pairs([(1.0, 2.0), None])


def test_mark_evaluated_requires_complete_spec():
    spec = SeriesSpec()
    spec.declare_count(1)
    with pytest.raises(NotReady):
        spec.mark_evaluated()

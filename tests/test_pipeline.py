import pytest

from bsmscan.constraints import Constraint, Pipeline, Severity
from bsmscan.errors import DuplicateKey, UnknownKey
from bsmscan.models import ParameterPoint


class Recorder(Constraint):
    def __init__(self, constraint_id, severity, result):
        super().__init__(severity)
        self.constraint_id = constraint_id
        self.result = result
        self.calls = 0

    def apply(self, point):
        self.calls += 1
        point.data.put(f"{self.constraint_id}_ran", 1.0)
        return self.result


class Doubler(Constraint):
    """Requires Recorder ``A`` to be run beforehand."""

    constraint_id = "Doubler"

    def apply(self, point):
        point.data.put("doubled", 2 * point.data["A_ran"])
        return True


def test_short_circuit():
    a = Recorder("A", Severity.apply, False)
    b = Recorder("B", Severity.apply, True)
    pipeline = Pipeline([a, b])
    point = ParameterPoint()
    assert pipeline(point) is False
    assert a.calls == 1
    assert b.calls == 0
    assert "B_ran" not in point.data


def test_all_pass():
    a = Recorder("A", Severity.apply, True)
    b = Recorder("B", Severity.apply, True)
    pipeline = Pipeline([a, b])
    point = ParameterPoint()
    assert pipeline(point) is True
    assert list(point.data) == ["A_ran", "B_ran"]


def test_ignored_failure_continues():
    a = Recorder("A", Severity.ignore, False)
    b = Recorder("B", Severity.apply, True)
    point = ParameterPoint()
    assert Pipeline([a, b])(point) is True
    assert point.data["valid_A"] == 0.0
    assert b.calls == 1


def test_first_failure():
    pipeline = Pipeline([Recorder("A", "apply", True), Recorder("B", "apply", False), Recorder("C", "apply", False)])
    assert pipeline.first_failure(ParameterPoint()) == "B"
    assert pipeline.ids == ["A", "B", "C"]
    assert len(pipeline) == 3


def test_order_dependency():
    point = ParameterPoint()
    assert Pipeline([Recorder("A", "apply", True), Doubler("apply")])(point)
    assert point.data["doubled"] == 2.0
    with pytest.raises(UnknownKey):
        Pipeline([Doubler("apply"), Recorder("A", "apply", True)])(ParameterPoint())


def test_running_twice_is_a_defect():
    pipeline = Pipeline([Recorder("A", "apply", True)])
    point = ParameterPoint()
    pipeline(point)
    with pytest.raises(DuplicateKey):
        pipeline(point)


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError, match="Duplicate constraint id"):
        Pipeline([Recorder("A", "apply", True), Recorder("A", "skip", True)])

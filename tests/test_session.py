import copy
import gc
import pickle

import pytest

from bsmscan.constraints import Constraint
from bsmscan.models import ParameterPoint
from bsmscan.session import SessionHandle


class FakeLibrary(SessionHandle):
    pass


class OtherLibrary(SessionHandle):
    pass


def test_single_live_instance():
    handle = FakeLibrary()
    try:
        with pytest.raises(RuntimeError, match="already open"):
            FakeLibrary()
        # other libraries are independent
        with OtherLibrary() as other:
            assert other.is_open
        assert not other.is_open
    finally:
        handle.close()
    with FakeLibrary() as reopened:
        assert reopened.is_open


def test_not_copyable():
    with FakeLibrary() as handle:
        with pytest.raises(TypeError):
            copy.copy(handle)
        with pytest.raises(TypeError):
            copy.deepcopy(handle)
        with pytest.raises(TypeError):
            pickle.dumps(handle)


def test_close_twice():
    handle = FakeLibrary()
    handle.close()
    handle.close()
    assert not handle.is_open


class LibraryBacked(Constraint):
    constraint_id = "LibraryBacked"

    def __init__(self, severity, session):
        super().__init__(severity)
        self.session = session

    def apply(self, point):
        point.data.put("session_open", float(self.session.is_open))
        return self.session.is_open


def test_constraints_share_handle():
    with FakeLibrary() as handle:
        first = LibraryBacked("apply", handle)
        second = LibraryBacked("ignore", handle)
        assert first.session is second.session
        point = ParameterPoint()
        assert first(point)
        assert point.data["session_open"] == 1.0
    assert not first(ParameterPoint())


def test_collected_handle_is_released():
    handle = FakeLibrary()
    del handle
    gc.collect()
    with FakeLibrary() as reopened:
        assert reopened.is_open

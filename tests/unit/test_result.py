"""
Unit tests for the Result variant.
"""
import pytest

from jsondb.storage.result import Outcome, Result


@pytest.mark.unit
class TestResult:

    def test_ok(self):
        r = Result.ok([1, 2])

        assert r.outcome is Outcome.VALUE
        assert r.is_ok and not r.is_empty and not r.is_error
        assert r.unwrap() == [1, 2]
        assert r.unwrap_or([]) == [1, 2]

    def test_ok_with_falsy_value_is_still_ok(self):
        assert Result.ok([]).is_ok
        assert Result.ok([]).unwrap_or(None) == []

    def test_empty(self):
        r = Result.empty()

        assert r.is_empty
        assert r.unwrap() is None
        assert r.unwrap_or("fallback") == "fallback"

    def test_failed(self):
        err = OSError("disk full")
        r = Result.failed(err)

        assert r.is_error
        assert r.error is err
        assert r.unwrap_or(False) is False
        with pytest.raises(OSError, match="disk full"):
            r.unwrap()

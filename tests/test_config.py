import pytest
from pydantic import ValidationError

from enumcases import EvaluationPolicy


def test_defaults():
    policy = EvaluationPolicy()
    assert policy.max_depth == 200
    assert policy.int_bits is None
    assert policy.int_range is None


def test_int_range():
    assert EvaluationPolicy(int_bits=8).int_range == (-128, 127)


@pytest.mark.parametrize("kwargs", [{"max_depth": 0}, {"int_bits": 1}])
def test_validation(kwargs):
    with pytest.raises(ValidationError):
        EvaluationPolicy(**kwargs)


def test_frozen():
    policy = EvaluationPolicy()
    with pytest.raises(ValidationError):
        policy.max_depth = 5


def test_from_env():
    policy = EvaluationPolicy.from_env(
        {"ENUMCASES_MAX_DEPTH": "50", "ENUMCASES_INT_BITS": " 32 "}
    )
    assert policy == EvaluationPolicy(max_depth=50, int_bits=32)
    assert EvaluationPolicy.from_env({}) == EvaluationPolicy()
    assert EvaluationPolicy.from_env({"ENUMCASES_INT_BITS": ""}) == EvaluationPolicy()


def test_from_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("ENUMCASES_MAX_DEPTH", "12")
    monkeypatch.delenv("ENUMCASES_INT_BITS", raising=False)
    assert EvaluationPolicy.from_env().max_depth == 12


def test_from_env_rejects_garbage():
    with pytest.raises(ValidationError, match="int_bits"):
        EvaluationPolicy.from_env({"ENUMCASES_INT_BITS": "wide"})
    with pytest.raises(ValueError, match="max_depth"):
        EvaluationPolicy.from_env({"ENUMCASES_MAX_DEPTH": "0"})

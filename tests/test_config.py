import io
import sys

import pytest

from sable.config import DEFAULT_MAX_EXPANSION_DEPTH, EvalConfig


def test_defaults():
    config = EvalConfig()
    assert config.scoping == "dynamic"
    assert config.max_expansion_depth == DEFAULT_MAX_EXPANSION_DEPTH
    assert config.output_stream is sys.stdout
    assert config.input_stream is sys.stdin


def test_invalid_values_are_rejected():
    with pytest.raises(ValueError):
        EvalConfig(scoping="static")
    with pytest.raises(ValueError):
        EvalConfig(max_expansion_depth=0)


def test_with_streams():
    out = io.StringIO()
    config = EvalConfig(scoping="lexical").with_streams(stdout=out)
    assert config.output_stream is out
    assert config.scoping == "lexical"


def test_from_env(monkeypatch):
    monkeypatch.setenv("SABLE_SCOPING", "Lexical")
    monkeypatch.setenv("SABLE_MAX_EXPANSION_DEPTH", "25")
    config = EvalConfig.from_env()
    assert config.scoping == "lexical"
    assert config.max_expansion_depth == 25


@pytest.mark.parametrize("raw", ["none", "0", "NONE"])
def test_from_env_unbounded_depth(monkeypatch, raw):
    monkeypatch.setenv("SABLE_MAX_EXPANSION_DEPTH", raw)
    assert EvalConfig.from_env().max_expansion_depth is None


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("SABLE_SCOPING", raising=False)
    monkeypatch.delenv("SABLE_MAX_EXPANSION_DEPTH", raising=False)
    assert EvalConfig.from_env() == EvalConfig()


def test_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("SABLE_MAX_EXPANSION_DEPTH", "deep")
    with pytest.raises(ValueError):
        EvalConfig.from_env()

# tests/test_config.py
import pytest

from sudoku_search.config import DotDict, SolverConfig, config_from_dict, load_config, load_yaml, merge_overrides


def test_defaults():
    cfg = SolverConfig()
    assert cfg.to_dict() == {
        "ranker": "full",
        "value_order": "ascending",
        "max_steps": None,
        "precheck": False,
        "progress_every": 0,
    }


def test_repo_default_yaml(repo_root):
    cfg = load_config(repo_root / "configs" / "default.yaml")
    assert cfg == SolverConfig()


def test_yaml_with_overrides(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("ranker: incremental\nmax_steps: 1000\nunrelated: 1\n", encoding="utf-8")
    raw = load_yaml(path)
    assert isinstance(raw, DotDict)
    assert raw.ranker == "incremental"
    cfg = load_config(path, max_steps=None, precheck=True)
    assert cfg.ranker == "incremental"
    assert cfg.max_steps == 1000
    assert cfg.precheck is True


def test_merge_overrides_skips_none():
    assert merge_overrides({"a": 1}, a=None, b=2) == {"a": 1, "b": 2}


@pytest.mark.parametrize(
    "data",
    [{"ranker": "nope"}, {"value_order": "nope"}, {"max_steps": -1}, {"progress_every": -5}],
)
def test_invalid_values(data):
    with pytest.raises(ValueError):
        config_from_dict(data)

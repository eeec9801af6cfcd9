"""
Test script for configuration system.
"""
from pathlib import Path

import pytest

from reversi.config import (
    Config,
    EvaluationConfig,
    SearchConfig,
    get_default_config,
)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "configs" / "default_config.json"


def test_config_creation():
    """Default values of a fresh config."""
    config = get_default_config()
    assert config.project_name == "Reversi"
    assert config.search.depth == 4
    assert config.search.algorithm == 'alphabeta'
    assert config.evaluation.evaluator == 'disc'
    assert config.evaluation.corner_weight == 8
    assert config.arena.games == 10
    assert config.logging.log_level == "INFO"
    assert not config.logging.log_to_file


def test_save_and_load(tmp_path):
    """A saved config loads back to the same values."""
    config = get_default_config()
    config.search.depth = 6
    config.evaluation = EvaluationConfig(evaluator='positional', corner_weight=10)

    path = tmp_path / "nested" / "config.json"
    config.save(str(path))
    loaded = Config.load(str(path))

    assert loaded.to_dict() == config.to_dict()
    assert loaded.search.depth == 6
    assert loaded.evaluation.evaluator == 'positional'


def test_default_config_file():
    """The shipped default config matches the built-in defaults."""
    config = Config.load(str(DEFAULT_CONFIG_PATH))
    assert config.to_dict() == get_default_config().to_dict()


def test_partial_dict_fills_defaults():
    config = Config.from_dict({'search': {'depth': 2}})
    assert config.search.depth == 2
    assert config.search.algorithm == 'alphabeta'
    assert config.evaluation == EvaluationConfig()


def test_invalid_values():
    with pytest.raises(ValueError):
        SearchConfig(algorithm='negamax')
    with pytest.raises(ValueError):
        EvaluationConfig(evaluator='mobility')
    with pytest.raises(ValueError):
        Config.from_dict({'search': {'algorithm': 'mcts'}})
    with pytest.raises(TypeError):
        Config.from_dict({'search': {'width': 3}})


@pytest.mark.parametrize("depth", [0, 11, 2.5, True])
def test_invalid_depth(depth):
    """Search depth outside 1..10 is rejected when the config is built."""
    with pytest.raises(ValueError):
        SearchConfig(depth=depth)
    with pytest.raises(ValueError):
        Config.from_dict({'search': {'depth': depth}})

"""
Configuration parameters for the Reversi engine.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

ALGORITHMS = ('alphabeta', 'minimax')
EVALUATORS = ('disc', 'positional')
MIN_DEPTH = 1
MAX_DEPTH = 10


def validate_depth(depth: int) -> None:
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise ValueError(f"Search depth must be an integer, got {depth!r}")
    if not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise ValueError(f"Search depth must be between {MIN_DEPTH} and {MAX_DEPTH}, got {depth}")


@dataclass
class SearchConfig:
    """Configuration for the machine player's tree search."""
    depth: int = 4
    algorithm: str = 'alphabeta'  # 'alphabeta' in play, 'minimax' for comparison runs

    def __post_init__(self):
        validate_depth(self.depth)
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown search algorithm: {self.algorithm}")


@dataclass
class EvaluationConfig:
    """Configuration for the leaf evaluation function."""
    evaluator: str = 'disc'
    corner_weight: int = 8
    border_weight: int = 4
    inside_weight: int = 1
    blocked_bonus: int = 4  # Bonus when the opponent cannot move

    def __post_init__(self):
        if self.evaluator not in EVALUATORS:
            raise ValueError(f"Unknown evaluator: {self.evaluator}")


@dataclass
class ArenaConfig:
    """Configuration for machine-vs-machine matches."""
    games: int = 10
    seed: int = 0
    output_dir: str = "match_results"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = True  # Progress bars in matches


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    search: SearchConfig = field(default_factory=SearchConfig)
    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Reversi'),
            search=SearchConfig(**config_dict.get('search', {})),
            evaluation=EvaluationConfig(**config_dict.get('evaluation', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()

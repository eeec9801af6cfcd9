"""
Compare minimax and alpha-beta on random positions: both must choose the
same moves with the same scores; the report shows how many nodes each visits.
"""
import argparse
import sys
from pathlib import Path

from tqdm import tqdm

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi.config import EVALUATORS, EvaluationConfig
from reversi.evaluation import build_evaluator
from reversi.search.comparison import (
    SearchMismatchError,
    assert_equivalent,
    compare_searches,
    sample_positions,
    summarize,
)


def main():
    parser = argparse.ArgumentParser(description='Compare minimax and alpha-beta search')
    parser.add_argument('--positions', type=int, default=10,
                        help='Number of random positions')
    parser.add_argument('--plies', type=int, default=12,
                        help='Random plies played from the opening to reach each position')
    parser.add_argument('--min-depth', type=int, default=1)
    parser.add_argument('--max-depth', type=int, default=4)
    parser.add_argument('--evaluator', choices=list(EVALUATORS), default='disc')
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    evaluator = build_evaluator(EvaluationConfig(evaluator=args.evaluator))
    depths = range(args.min_depth, args.max_depth + 1)
    positions = sample_positions(args.positions, args.plies, seed=args.seed)

    comparisons = []
    for state in tqdm(positions, desc="positions"):
        comparisons.extend(compare_searches(state, depths, evaluator))

    print("\nDepth  Positions  Minimax nodes  Alpha-beta nodes  Ratio  Agreements")
    print("-----  ---------  -------------  ----------------  -----  ----------")
    for depth, entry in summarize(comparisons).items():
        print(f"{depth:5d}  {entry['positions']:9d}  {entry['minimax_nodes']:13d}  "
              f"{entry['alphabeta_nodes']:16d}  {entry['ratio']:5.2f}  {entry['agreements']:10d}")

    try:
        assert_equivalent(comparisons)
    except SearchMismatchError as e:
        print(f"\nMISMATCH: {e}")
        return 1
    print("\nAll searches agree.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

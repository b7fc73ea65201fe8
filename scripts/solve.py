#!/usr/bin/env python3
"""
目标数算式求解脚本

Usage:
    python scripts/solve.py 3 3 8 8                 # 默认目标 24
    python scripts/solve.py 1 5 5 5 --target 24 --limit 10
    python scripts/solve.py A J Q K --target 24     # 按算 24 映射读取点数
    python scripts/solve.py 4 4 10 10 --config solver.json
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

# 添加项目根目录到路径
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from core.cards import GameMapping, STR_TO_RANK, numeric_value
from core.config import SolverConfig
from core.expression import ExpressionSolver

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Target number expression solver")

    parser.add_argument("operands", nargs="*", help="Numbers or card ranks (A, J, Q, K)")
    parser.add_argument("--target", type=float, default=None, help="Target value (default from config)")
    parser.add_argument("--limit", type=int, default=None, help="Max solutions to print")
    parser.add_argument("--config", type=str, help="JSON file with solver config")

    return parser.parse_args(argv)


def parse_operand(token: str) -> Union[int, float]:
    """数字或牌面 (A=1, J=11, Q=12, K=13)"""
    upper = token.strip().upper()
    if upper in STR_TO_RANK:
        return numeric_value(STR_TO_RANK[upper], GameMapping.EXPRESSION)
    try:
        return int(token)
    except ValueError:
        return float(token)


def load_config(path: Optional[str]) -> SolverConfig:
    """加载配置文件"""
    if not path:
        return SolverConfig()
    with open(path) as f:
        return SolverConfig.from_dict(json.load(f))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        operands = [parse_operand(t) for t in args.operands]
        target = args.target if args.target is not None else config.default_target
        limit = args.limit if args.limit is not None else config.display_limit
        solutions = ExpressionSolver(config).solve(operands, target)
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 2

    target_text = int(target) if float(target).is_integer() else target
    if not solutions:
        print(f"No solution for {operands} -> {target_text}")
        return 0

    print(f"{len(solutions)} solutions for {operands} -> {target_text}")
    for expr in solutions[:limit]:
        print(f"  {expr} = {target_text}")
    if len(solutions) > limit:
        print(f"  ... {len(solutions) - limit} more")

    return 0


if __name__ == "__main__":
    sys.exit(main())

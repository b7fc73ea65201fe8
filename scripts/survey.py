#!/usr/bin/env python3
"""
牌型分布统计脚本

Usage:
    python scripts/survey.py --hands 10000 --seed 0
    python scripts/survey.py --hands 100000 --output survey.json
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# 添加项目根目录到路径
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from core.niuniu import HandType
from evaluation import HandSurvey, SurveyConfig

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Niu Niu hand distribution survey")

    parser.add_argument("--hands", type=int, default=10000, help="Number of hands")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-every", type=int, default=0, help="Progress interval")
    parser.add_argument("--output", type=str, help="Save results to JSON file")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = SurveyConfig(num_hands=args.hands, seed=args.seed, log_every=args.log_every)
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 2

    logger.info(f"Surveying {config.num_hands} hands (seed={config.seed})")
    result = HandSurvey(config).run()

    logger.info("=" * 50)
    logger.info("Survey Results")
    logger.info("=" * 50)
    for name, freq in result.frequencies().items():
        logger.info(f"{name:<20} {result.type_counts[HandType[name]]:>8}  {freq:.2%}")
    for rank, count in enumerate(result.niu_rank_counts):
        label = "Niu Niu" if rank == 0 else f"Niu {rank}"
        logger.info(f"  {label:<18} {int(count):>8}")
    logger.info(f"Strict pairs: {result.strict_pairs}")
    logger.info(f"Mean score: {result.mean_score:.1f} (std {result.std_score:.1f})")
    logger.info("=" * 50)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(result.to_dict(), f, indent=2)
        logger.info(f"Results saved to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

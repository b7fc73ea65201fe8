#!/usr/bin/env python3
"""
牛牛牌型判定脚本

Usage:
    python scripts/niuniu.py --cards "AS KH QD JC 10S"
    python scripts/niuniu.py --seed 42            # 随机发一手
    python scripts/niuniu.py --seed 42 --lang zh
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# 添加项目根目录到路径
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from core.cards import Card, deal_hand, parse_cards, cards_to_str
from core.niuniu import NiuNiuResult, NiuNiuEvaluator
from core.display import hand_type_name, describe, format_niu_rank

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Niu Niu hand evaluator")

    parser.add_argument("--cards", type=str, help='Five cards, e.g. "AS KH QD JC 10S"')
    parser.add_argument("--seed", type=int, default=None, help="Seed for dealing a random hand")
    parser.add_argument("--lang", type=str, default="en", choices=["en", "zh"])
    parser.add_argument(
        "--alternatives",
        type=int,
        default=5,
        help="Number of alternative splits to show",
    )

    return parser.parse_args(argv)


def format_result(result: NiuNiuResult, lang: str = "en") -> List[str]:
    """结果转多行文本"""
    lines = [
        f"{hand_type_name(result, lang)}: {describe(result, lang)}",
        f"Rank: {format_niu_rank(result)}  Score: {result.score}",
    ]
    if result.has_niu:
        lines.append(
            f"Base {cards_to_str(result.base_cards)} = {list(result.three_card_group)}"
            f"  Pair {cards_to_str(result.pair_cards)} = {list(result.two_card_group)}"
        )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        if args.cards:
            hand: List[Card] = parse_cards(args.cards)
        else:
            hand = deal_hand(seed=args.seed)
        result = NiuNiuEvaluator.evaluate(hand)
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 2

    print(f"Hand: {cards_to_str(hand)}")
    for line in format_result(result, args.lang):
        print(line)

    shown = result.alternatives[:args.alternatives]
    if shown:
        print(f"\nAlternatives ({len(shown)}/{len(result.alternatives)}):")
        for alt in shown:
            print(
                f"  {hand_type_name(alt, args.lang)}"
                f"  base={list(alt.three_card_group)} pair={list(alt.two_card_group)}"
                f"  score={alt.score}"
            )

    return 0


if __name__ == "__main__":
    sys.exit(main())

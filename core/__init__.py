"""
Core Layer - 纯游戏逻辑 (无数值计算依赖)

Modules:
    cards: 牌定义、数值映射、发牌
    niuniu: 牛牛牌型判定
    expression: 目标数算式搜索
    display: 牌型中英文显示
    config: 求解器配置
"""
from .cards import (
    Suit,
    Rank,
    GameMapping,
    Card,
    HAND_SIZE,
    numeric_value,
    generate_deck,
    shuffle_deck,
    deal_cards,
    deal_hand,
    parse_card,
    parse_cards,
    cards_to_str,
)

from .niuniu import (
    HandType,
    NiuNiuResult,
    NiuNiuEvaluator,
    InvalidHandSizeError,
    evaluate_hand,
)

from .expression import (
    Operator,
    Leaf,
    BinaryOp,
    ExpressionSolver,
    TooManyOperandsError,
    format_expression,
    solve,
)

from .display import hand_type_name, describe, format_niu_rank

from .config import SolverConfig

__all__ = [
    # cards
    "Suit",
    "Rank",
    "GameMapping",
    "Card",
    "HAND_SIZE",
    "numeric_value",
    "generate_deck",
    "shuffle_deck",
    "deal_cards",
    "deal_hand",
    "parse_card",
    "parse_cards",
    "cards_to_str",
    # niuniu
    "HandType",
    "NiuNiuResult",
    "NiuNiuEvaluator",
    "InvalidHandSizeError",
    "evaluate_hand",
    # expression
    "Operator",
    "Leaf",
    "BinaryOp",
    "ExpressionSolver",
    "TooManyOperandsError",
    "format_expression",
    "solve",
    # display
    "hand_type_name",
    "describe",
    "format_niu_rank",
    # config
    "SolverConfig",
]

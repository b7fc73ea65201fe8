"""
牌的定义与编码

使用标准 52 张牌 (无大小王)：
- 4 种花色 × 13 种点数 (A, 2-10, J, Q, K)
- 同一张牌在两个游戏中的数值不同 (见 GameMapping)
"""
from enum import Enum, IntEnum
from dataclasses import dataclass
from typing import List, Tuple, Dict, Optional, Sequence
import random


class Suit(Enum):
    """花色 (定义顺序即发牌顺序)"""
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class Rank(IntEnum):
    """点数"""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        """牌面显示字符"""
        return RANK_TO_STR[self]


class GameMapping(Enum):
    """点数到数值的映射方式"""
    NIU_NIU = "niuniu"          # 牛牛: J/Q/K 都算 10
    EXPRESSION = "expression"   # 算 24: J=11, Q=12, K=13


# 点数到显示字符的映射
RANK_TO_STR: Dict[int, str] = {
    1: 'A', 2: '2', 3: '3', 4: '4', 5: '5', 6: '6', 7: '7',
    8: '8', 9: '9', 10: '10', 11: 'J', 12: 'Q', 13: 'K',
}

# 显示字符到点数的映射 (T 为 10 的简写)
STR_TO_RANK: Dict[str, int] = {v: k for k, v in RANK_TO_STR.items()}
STR_TO_RANK['T'] = 10

SUIT_TO_SYMBOL: Dict[Suit, str] = {
    Suit.HEARTS: '♥',
    Suit.DIAMONDS: '♦',
    Suit.CLUBS: '♣',
    Suit.SPADES: '♠',
}

# 解析时接受字母或符号
STR_TO_SUIT: Dict[str, Suit] = {
    'H': Suit.HEARTS, 'D': Suit.DIAMONDS, 'C': Suit.CLUBS, 'S': Suit.SPADES,
    **{symbol: suit for suit, symbol in SUIT_TO_SYMBOL.items()},
}

FACE_RANKS: Tuple[Rank, ...] = (Rank.JACK, Rank.QUEEN, Rank.KING)

SUIT_ORDER: Tuple[Suit, ...] = tuple(Suit)

HAND_SIZE = 5


def numeric_value(rank: int, mapping: GameMapping = GameMapping.NIU_NIU) -> int:
    """
    获取点数在指定游戏中的数值

    Args:
        rank: 点数 (1-13)
        mapping: 映射方式

    Returns:
        牛牛: A=1, 2-10 为面值, J/Q/K=10
        算 24: A=1, 2-10 为面值, J=11, Q=12, K=13
    """
    rank = Rank(rank)
    if mapping is GameMapping.NIU_NIU:
        return min(int(rank), 10)
    return int(rank)


@dataclass(frozen=True, slots=True)
class Card:
    """
    不可变的牌

    Attributes:
        suit: 花色
        rank: 点数
        numeric_value: 当前游戏下的数值
    """
    suit: Suit
    rank: Rank
    numeric_value: int

    @classmethod
    def create(
        cls,
        suit: Suit,
        rank: int,
        mapping: GameMapping = GameMapping.NIU_NIU
    ) -> 'Card':
        """按映射方式创建牌"""
        rank = Rank(rank)
        return cls(suit=suit, rank=rank, numeric_value=numeric_value(rank, mapping))

    @property
    def label(self) -> str:
        return self.rank.label

    @property
    def is_face(self) -> bool:
        """是否为公仔牌 (J/Q/K)"""
        return self.rank in FACE_RANKS

    @property
    def is_spade_ace(self) -> bool:
        return self.suit is Suit.SPADES and self.rank is Rank.ACE

    @property
    def sort_key(self) -> Tuple[int, int]:
        """规范排序键: 先点数后花色"""
        return (int(self.rank), SUIT_ORDER.index(self.suit))

    def __str__(self) -> str:
        return f"{self.label}{SUIT_TO_SYMBOL[self.suit]}"


def generate_deck(mapping: GameMapping = GameMapping.NIU_NIU) -> List[Card]:
    """
    生成完整牌组 (52 张)

    顺序固定: 花色优先 (红桃、方块、梅花、黑桃)，同花色内 A 到 K

    Args:
        mapping: 牌的数值映射

    Returns:
        牌列表
    """
    return [Card.create(suit, rank, mapping) for suit in Suit for rank in Rank]


def shuffle_deck(deck: Sequence[Card], seed: Optional[int] = None) -> List[Card]:
    """
    洗牌 (返回新列表，不修改原牌组)

    Args:
        deck: 牌组
        seed: 随机种子，None 表示不固定

    Returns:
        洗好的牌组
    """
    shuffled = list(deck)
    random.Random(seed).shuffle(shuffled)
    return shuffled


def deal_cards(deck: Sequence[Card], count: int) -> List[Card]:
    """从牌组顶部发 count 张牌"""
    if count < 0 or count > len(deck):
        raise ValueError(f"Cannot deal {count} cards from a deck of {len(deck)}")
    return list(deck[:count])


def deal_hand(
    seed: Optional[int] = None,
    size: int = HAND_SIZE,
    mapping: GameMapping = GameMapping.NIU_NIU
) -> List[Card]:
    """洗一副新牌并发一手牌"""
    return deal_cards(shuffle_deck(generate_deck(mapping), seed), size)


def parse_card(text: str, mapping: GameMapping = GameMapping.NIU_NIU) -> Card:
    """
    解析单张牌

    Args:
        text: 点数 + 花色，如 "AS", "10h", "Kd", "T♠"

    Returns:
        Card
    """
    s = text.strip().upper()
    if len(s) < 2:
        raise ValueError(f"Invalid card: {text!r}")

    rank_str, suit_str = s[:-1], s[-1]
    if rank_str not in STR_TO_RANK:
        raise ValueError(f"Invalid rank in card: {text!r}")
    if suit_str not in STR_TO_SUIT:
        raise ValueError(f"Invalid suit in card: {text!r}")

    return Card.create(STR_TO_SUIT[suit_str], STR_TO_RANK[rank_str], mapping)


def parse_cards(text: str, mapping: GameMapping = GameMapping.NIU_NIU) -> List[Card]:
    """
    解析以空白或逗号分隔的多张牌

    Args:
        text: 如 "AS KH QD JC 10S"

    Returns:
        牌列表
    """
    tokens = text.replace(',', ' ').split()
    return [parse_card(token, mapping) for token in tokens]


def cards_to_str(cards: Sequence[Card]) -> str:
    """牌列表转可读字符串，如 "A♠ K♥ 10♦" """
    return ' '.join(str(card) for card in cards)

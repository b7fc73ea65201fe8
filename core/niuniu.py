"""
牛牛牌型判定

五张牌分成 "三张底牌 + 两张牌"：
- 底牌三张之和为 10 的倍数才算有牛
- 两张牌之和的个位数即为牛几 (个位为 0 即牛牛)
- 3 和 6 可以互相替代 (每张牌各自选择)
- 特殊牌型优先: 至尊黑桃A > 五花牛 > 五小牛

所有方法都是纯函数，无状态
"""
from enum import IntEnum
from dataclasses import dataclass, replace
from typing import List, Tuple, Optional, Sequence, Iterator, Set
import itertools

from .cards import Card, GameMapping, HAND_SIZE, numeric_value


class HandType(IntEnum):
    """牌型 (数值即特殊牌型的等级)"""
    NO_NIU = 0              # 没牛
    NIU = 1                 # 牛一 ~ 牛牛 (niu_rank 0-9)
    FIVE_FACE_CARDS = 11    # 五花牛
    FIVE_SMALL_CARDS = 12   # 五小牛
    SUPREME_SPADE_ACE = 13  # 至尊黑桃A


# 特殊牌型的固定分数
SPECIAL_SCORES = {
    HandType.SUPREME_SPADE_ACE: 5000,
    HandType.FIVE_SMALL_CARDS: 4800,
    HandType.FIVE_FACE_CARDS: 4500,
}

# 普通牌型分档
STRICT_PAIR_TIER = 3000   # 对子 (两张牌面相同)
NIU_NIU_TIER = 2000       # 牛牛
NORMAL_TIER = 1000        # 牛一 ~ 牛九

# 3/6 互换: 每张牌可取的数值 (首选原值)
SUBSTITUTIONS = {3: (3, 6), 6: (6, 3)}


class InvalidHandSizeError(ValueError):
    """手牌张数不是 5"""


@dataclass(frozen=True)
class NiuNiuResult:
    """
    牌型判定结果

    Attributes:
        hand_type: 牌型
        niu_rank: 牛几 (0 表示牛牛)，仅 NIU 有值
        strict_pair: 两张牌是否为对子 (牌面相同，不看替换)
        three_card_group: 底牌三张的有效数值 (替换后)
        two_card_group: 两张牌的有效数值 (替换后)
        base_cards: 底牌对应的牌
        pair_cards: 两张牌对应的牌
        comparison_score: 比较用分数
        alternatives: 其他可行的分法 (按分数降序，不含自身)
    """
    hand_type: HandType
    niu_rank: Optional[int] = None
    strict_pair: bool = False
    three_card_group: Tuple[int, ...] = ()
    two_card_group: Tuple[int, ...] = ()
    base_cards: Tuple[Card, ...] = ()
    pair_cards: Tuple[Card, ...] = ()
    comparison_score: float = 0.0
    alternatives: Tuple['NiuNiuResult', ...] = ()

    @property
    def score(self) -> int:
        return int(self.comparison_score)

    @property
    def has_niu(self) -> bool:
        return self.hand_type != HandType.NO_NIU

    @property
    def is_special(self) -> bool:
        return self.hand_type in SPECIAL_SCORES

    @property
    def is_niu_niu(self) -> bool:
        return self.hand_type == HandType.NIU and self.niu_rank == 0

    @property
    def pair_sum(self) -> int:
        return sum(self.two_card_group)

    @property
    def dedup_key(self) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """去重键: 排序后的底牌数值与两张牌数值"""
        return (tuple(sorted(self.three_card_group)), tuple(sorted(self.two_card_group)))


NO_NIU_RESULT = NiuNiuResult(hand_type=HandType.NO_NIU)


def niu_value(card: Card) -> int:
    """牛牛数值 (始终按点数重新计算)"""
    return numeric_value(card.rank, GameMapping.NIU_NIU)


def possible_values(value: int) -> Tuple[int, ...]:
    """一张牌可取的有效数值"""
    return SUBSTITUTIONS.get(value, (value,))


def comparison_score(niu_rank: int, strict_pair: bool, pair_sum: int) -> float:
    """
    普通牌型的比较分数

    优先级: 对子 > 牛牛 > 牛几 (大者优先) > 两张牌原始和

    Args:
        niu_rank: 牛几 (0 表示牛牛)
        strict_pair: 是否对子
        pair_sum: 两张牌有效数值之和

    Returns:
        分数，越大越好
    """
    rank_score = 10 if niu_rank == 0 else niu_rank

    if strict_pair:
        tier = STRICT_PAIR_TIER
    elif niu_rank == 0:
        tier = NIU_NIU_TIER
    else:
        tier = NORMAL_TIER

    return tier + rank_score * 100 + pair_sum / 100


class NiuNiuEvaluator:
    """
    牛牛牌型判定器

    所有方法都是静态方法，无状态
    """

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> NiuNiuResult:
        """
        判定五张牌的牌型

        Args:
            cards: 恰好 5 张牌 (顺序无关)

        Returns:
            最佳牌型，其余可行分法放在 alternatives 中
        """
        if len(cards) != HAND_SIZE:
            raise InvalidHandSizeError(
                f"Niu Niu requires exactly {HAND_SIZE} cards, got {len(cards)}"
            )

        # 规范顺序，保证结果与输入顺序无关
        hand = tuple(sorted(cards, key=lambda c: c.sort_key))

        special = NiuNiuEvaluator.detect_special(hand)
        if special is not None:
            return special

        candidates = NiuNiuEvaluator.rank_candidates(hand)
        if not candidates:
            return NO_NIU_RESULT

        return replace(candidates[0], alternatives=tuple(candidates[1:]))

    @staticmethod
    def detect_special(hand: Sequence[Card]) -> Optional[NiuNiuResult]:
        """
        检测特殊牌型 (按优先级，命中即返回)

        Args:
            hand: 已按规范顺序排列的 5 张牌

        Returns:
            特殊牌型结果，没有则返回 None
        """
        values = [niu_value(c) for c in hand]

        # 至尊黑桃A: 黑桃A + 四张十点牌，且至少一张公仔牌
        spade_ace = next((c for c in hand if c.is_spade_ace), None)
        ten_cards = [c for c in hand if niu_value(c) == 10]
        if spade_ace is not None and len(ten_cards) == 4 and any(c.is_face for c in ten_cards):
            return NiuNiuEvaluator._special(
                HandType.SUPREME_SPADE_ACE,
                base=ten_cards[:3],
                pair=[spade_ace, ten_cards[3]],
            )

        # 五花牛: 五张都是公仔牌
        if all(c.is_face for c in hand):
            return NiuNiuEvaluator._special(
                HandType.FIVE_FACE_CARDS, base=hand[:3], pair=hand[3:]
            )

        # 五小牛: 每张都小于 5 且总和不超过 10
        if all(v < 5 for v in values) and sum(values) <= 10:
            return NiuNiuEvaluator._special(
                HandType.FIVE_SMALL_CARDS, base=hand[:3], pair=hand[3:]
            )

        return None

    @staticmethod
    def _special(hand_type: HandType, base: Sequence[Card], pair: Sequence[Card]) -> NiuNiuResult:
        return NiuNiuResult(
            hand_type=hand_type,
            three_card_group=tuple(niu_value(c) for c in base),
            two_card_group=tuple(niu_value(c) for c in pair),
            base_cards=tuple(base),
            pair_cards=tuple(pair),
            comparison_score=float(SPECIAL_SCORES[hand_type]),
        )

    @staticmethod
    def iter_splits(hand: Sequence[Card]) -> Iterator[Tuple[Tuple[Card, ...], Tuple[Card, ...]]]:
        """枚举 C(5,3)=10 种 "三张 + 两张" 分法"""
        indices = range(len(hand))
        for combo in itertools.combinations(indices, 3):
            base = tuple(hand[i] for i in combo)
            pair = tuple(hand[i] for i in indices if i not in combo)
            yield base, pair

    @staticmethod
    def find_base(base: Sequence[Card]) -> Optional[Tuple[int, ...]]:
        """
        找到底牌的第一种有效替换组合

        Args:
            base: 三张牌

        Returns:
            和为 10 的倍数的有效数值，找不到返回 None
        """
        options = [possible_values(niu_value(c)) for c in base]
        for combo in itertools.product(*options):
            if sum(combo) % 10 == 0:
                return combo
        return None

    @staticmethod
    def rank_candidates(hand: Sequence[Card]) -> List[NiuNiuResult]:
        """
        枚举所有可行分法，按分数降序排列并去重

        Args:
            hand: 已按规范顺序排列的 5 张牌

        Returns:
            候选结果列表 (可能为空)
        """
        candidates: List[NiuNiuResult] = []

        for base, pair in NiuNiuEvaluator.iter_splits(hand):
            base_values = NiuNiuEvaluator.find_base(base)
            if base_values is None:
                continue

            strict_pair = pair[0].rank == pair[1].rank
            options = [possible_values(niu_value(c)) for c in pair]
            for pair_values in itertools.product(*options):
                pair_sum = sum(pair_values)
                niu_rank = pair_sum % 10
                candidates.append(NiuNiuResult(
                    hand_type=HandType.NIU,
                    niu_rank=niu_rank,
                    strict_pair=strict_pair,
                    three_card_group=base_values,
                    two_card_group=pair_values,
                    base_cards=base,
                    pair_cards=pair,
                    comparison_score=comparison_score(niu_rank, strict_pair, pair_sum),
                ))

        # 稳定排序后去重，保留分数最高的那个
        candidates.sort(key=lambda r: r.comparison_score, reverse=True)
        seen: Set[Tuple[Tuple[int, ...], Tuple[int, ...]]] = set()
        unique = []
        for result in candidates:
            if result.dedup_key in seen:
                continue
            seen.add(result.dedup_key)
            unique.append(result)
        return unique


def evaluate_hand(cards: Sequence[Card]) -> NiuNiuResult:
    """判定五张牌的牌型 (NiuNiuEvaluator.evaluate 的快捷方式)"""
    return NiuNiuEvaluator.evaluate(cards)

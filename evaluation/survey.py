"""
牌型分布统计

随机发大量牌，统计各牌型出现的频率
"""
from typing import Dict, List, Optional, Any
from dataclasses import dataclass
import random
import logging

import numpy as np

from core.cards import generate_deck, HAND_SIZE
from core.niuniu import HandType, NiuNiuEvaluator

from .config import SurveyConfig

logger = logging.getLogger(__name__)


@dataclass
class SurveyResult:
    """
    统计结果

    Attributes:
        hands: 总手数
        type_counts: 各牌型手数
        niu_rank_counts: 牛几的手数 (下标 0 为牛牛，长度 10)
        strict_pairs: 最佳分法为对子的手数
        mean_score: 平均分
        std_score: 分数标准差
    """
    hands: int
    type_counts: Dict[HandType, int]
    niu_rank_counts: np.ndarray
    strict_pairs: int = 0
    mean_score: float = 0.0
    std_score: float = 0.0

    def frequencies(self) -> Dict[str, float]:
        """各牌型频率"""
        if self.hands == 0:
            return {t.name: 0.0 for t in HandType}
        return {t.name: self.type_counts.get(t, 0) / self.hands for t in HandType}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hands": self.hands,
            "type_counts": {t.name: self.type_counts.get(t, 0) for t in HandType},
            "frequencies": self.frequencies(),
            "niu_rank_counts": self.niu_rank_counts.tolist(),
            "strict_pairs": self.strict_pairs,
            "mean_score": self.mean_score,
            "std_score": self.std_score,
        }

    def __repr__(self) -> str:
        return (
            f"SurveyResult(hands={self.hands}, "
            f"no_niu={self.frequencies()[HandType.NO_NIU.name]:.2%}, "
            f"mean_score={self.mean_score:.1f})"
        )


class HandSurvey:
    """
    牌型分布统计器

    每手都从一副完整的新牌中随机抽 5 张
    """

    def __init__(self, config: Optional[SurveyConfig] = None):
        self.config = config or SurveyConfig()
        self._deck = generate_deck()

    def run(self) -> SurveyResult:
        """
        执行统计

        Returns:
            统计结果
        """
        n_hands = self.config.num_hands
        rng = random.Random(self.config.seed)

        type_counts: Dict[HandType, int] = {t: 0 for t in HandType}
        niu_ranks: List[int] = []
        scores = np.zeros(n_hands, dtype=np.float64)
        strict_pairs = 0

        for hand_idx in range(n_hands):
            hand = rng.sample(self._deck, HAND_SIZE)
            result = NiuNiuEvaluator.evaluate(hand)

            type_counts[result.hand_type] += 1
            scores[hand_idx] = result.score
            if result.hand_type == HandType.NIU:
                niu_ranks.append(result.niu_rank)
                if result.strict_pair:
                    strict_pairs += 1

            if self.config.log_every and (hand_idx + 1) % self.config.log_every == 0:
                logger.info(
                    f"Hand {hand_idx + 1}/{n_hands}, "
                    f"No Niu rate: {type_counts[HandType.NO_NIU] / (hand_idx + 1):.2%}"
                )

        return SurveyResult(
            hands=n_hands,
            type_counts=type_counts,
            niu_rank_counts=np.bincount(np.asarray(niu_ranks, dtype=np.int64), minlength=10),
            strict_pairs=strict_pairs,
            mean_score=float(scores.mean()) if n_hands > 0 else 0.0,
            std_score=float(scores.std()) if n_hands > 0 else 0.0,
        )

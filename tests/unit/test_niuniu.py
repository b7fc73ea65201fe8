"""牛牛牌型判定测试"""
import itertools

import pytest

from core.cards import parse_cards
from core.niuniu import (
    HandType,
    NiuNiuEvaluator,
    NiuNiuResult,
    InvalidHandSizeError,
    comparison_score,
    possible_values,
    evaluate_hand,
)


def evaluate(text: str) -> NiuNiuResult:
    return NiuNiuEvaluator.evaluate(parse_cards(text))


class TestHandSize:
    """手牌张数测试"""

    def test_too_few(self):
        with pytest.raises(InvalidHandSizeError):
            evaluate("AS KH QD JC")

    def test_too_many(self):
        with pytest.raises(InvalidHandSizeError):
            evaluate("AS KH QD JC 10S 9H")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            NiuNiuEvaluator.evaluate([])


class TestHelpers:
    """辅助函数测试"""

    def test_possible_values(self):
        assert possible_values(3) == (3, 6)
        assert possible_values(6) == (6, 3)
        assert possible_values(7) == (7,)

    def test_comparison_score(self):
        assert comparison_score(0, True, 20) == pytest.approx(4000.2)
        assert comparison_score(0, False, 10) == pytest.approx(3000.1)
        assert comparison_score(7, False, 17) == pytest.approx(1700.17)

    def test_priority_order(self):
        strict_low = comparison_score(1, True, 2)
        niu_niu = comparison_score(0, False, 20)
        niu_nine = comparison_score(9, False, 19)
        niu_one = comparison_score(1, False, 11)
        assert strict_low > niu_niu > niu_nine > niu_one

    def test_sum_breaks_ties(self):
        assert comparison_score(0, False, 20) > comparison_score(0, False, 10)


class TestSpecialHands:
    """特殊牌型测试"""

    def test_supreme_spade_ace(self):
        result = evaluate("AS KH QD JC 10S")
        assert result.hand_type == HandType.SUPREME_SPADE_ACE
        assert result.score == 5000
        assert result.three_card_group == (10, 10, 10)
        assert result.two_card_group == (1, 10)
        assert result.pair_cards[0].is_spade_ace
        assert result.alternatives == ()

    def test_supreme_needs_spade(self):
        result = evaluate("AH KH QD JC 10S")
        assert result.hand_type == HandType.NIU
        assert result.niu_rank == 1

    def test_supreme_needs_face_card(self):
        result = evaluate("AS 10H 10D 10C 10S")
        assert result.hand_type == HandType.NIU
        assert result.niu_rank == 1
        assert result.three_card_group == (10, 10, 10)
        assert result.two_card_group == (1, 10)
        assert result.alternatives == ()

    def test_supreme_needs_four_tens(self):
        result = evaluate("AS KH QD JC 9S")
        assert not result.is_special
        assert result.niu_rank == 0
        assert result.three_card_group == (1, 9, 10)
        assert result.two_card_group == (10, 10)
        assert len(result.alternatives) == 1
        assert result.alternatives[0].two_card_group == (1, 9)

    def test_five_face_cards(self):
        result = evaluate("JH QD KC JS QS")
        assert result.hand_type == HandType.FIVE_FACE_CARDS
        assert result.score == 4500
        assert result.three_card_group == (10, 10, 10)
        assert result.two_card_group == (10, 10)

    def test_five_face_cards_any_suits(self):
        a = evaluate("JH QD KC JS QS")
        b = evaluate("JC QH KS JD QC")
        assert a.hand_type == b.hand_type == HandType.FIVE_FACE_CARDS
        assert a.score == b.score == 4500

    def test_five_small_cards(self):
        result = evaluate("AH AD 2C 2S 3H")
        assert result.hand_type == HandType.FIVE_SMALL_CARDS
        assert result.score == 4800
        assert result.three_card_group == (1, 1, 2)
        assert result.two_card_group == (2, 3)

    def test_five_small_boundary(self):
        assert evaluate("AH 2D 2C 2S 3H").hand_type == HandType.FIVE_SMALL_CARDS
        assert evaluate("AH 2D 2C 3S 3H").hand_type != HandType.FIVE_SMALL_CARDS

    def test_five_small_ignores_substitution(self):
        assert evaluate("AH AD AC 3S 3H").hand_type == HandType.FIVE_SMALL_CARDS

    def test_five_is_not_small(self):
        result = evaluate("5H AD AC AS 2H")
        assert result.hand_type == HandType.NO_NIU

    def test_special_beats_generic_niu(self):
        # 五花牛本身也是牛牛，但特殊牌型优先
        result = evaluate("JH QD KC JS QS")
        assert result.hand_type == HandType.FIVE_FACE_CARDS
        assert result.alternatives == ()


class TestGenericSearch:
    """普通牌型搜索测试"""

    def test_substitution_in_pair(self):
        # 9+6+5=20 配 7+4=11 是牛一，但 4+7+9=20 配 5+(6→3)=8 是牛八
        result = evaluate("9H 6S 5D 7C 4H")
        assert result.hand_type == HandType.NIU
        assert result.niu_rank == 8
        assert not result.strict_pair
        assert result.three_card_group == (4, 7, 9)
        assert result.two_card_group == (5, 3)
        assert result.score == 1800

    def test_alternatives_include_natural_split(self):
        result = evaluate("9H 6S 5D 7C 4H")
        alts = result.alternatives
        assert len(alts) == 2
        assert alts[0].three_card_group == (4, 7, 9)
        assert alts[0].two_card_group == (5, 6)
        assert alts[1].three_card_group == (5, 6, 9)
        assert alts[1].two_card_group == (4, 7)
        assert alts[1].niu_rank == 1
        assert not alts[1].strict_pair

    def test_alternatives_sorted(self):
        result = evaluate("9H 6S 5D 7C 4H")
        scores = [result.comparison_score] + [a.comparison_score for a in result.alternatives]
        assert scores == sorted(scores, reverse=True)

    def test_no_niu_without_threes_or_sixes(self):
        result = evaluate("KH QD 9C 8S 4H")
        assert result.hand_type == HandType.NO_NIU
        assert result.score == 0
        assert result.three_card_group == ()
        assert result.two_card_group == ()
        assert not result.has_niu

    def test_base_needs_substitution(self):
        # 只有 9+5+(3→6)=20 能组成底牌
        result = evaluate("KH QD 9C 5S 3H")
        assert result.hand_type == HandType.NIU
        assert result.is_niu_niu
        assert sorted(result.three_card_group) == [5, 6, 9]
        assert result.two_card_group == (10, 10)
        assert not result.strict_pair
        assert result.score == 3000
        assert result.alternatives == ()

    def test_strict_pair_beats_niu_niu(self):
        result = evaluate("5H 5D KC QS JH")
        assert result.strict_pair
        assert result.niu_rank == 0
        assert result.two_card_group == (5, 5)
        assert result.three_card_group == (10, 10, 10)
        assert result.score == 4000
        assert len(result.alternatives) == 1
        alt = result.alternatives[0]
        assert not alt.strict_pair
        assert alt.niu_rank == 0
        assert alt.score == 3000

    def test_strict_pair_ignores_substitution(self):
        # 两张 8 是对子，牛六对子 > 普通牛六
        result = evaluate("8H 8D 4C QS 6H")
        assert result.strict_pair
        assert result.niu_rank == 6
        assert result.two_card_group == (8, 8)
        assert result.score == 3600

    def test_q_and_k_are_not_a_pair(self):
        result = evaluate("KH QD 9C 5S 3H")
        assert [c.label for c in result.pair_cards] == ["Q", "K"]
        assert not result.strict_pair

    def test_dedup_keeps_strict_pair(self):
        # 4+6+Q 配 KK 与 4+6+K 配 QK 数值相同，只保留对子
        result = evaluate("KH KS QD 4C 6H")
        assert result.strict_pair
        assert [c.label for c in result.pair_cards] == ["K", "K"]
        keys = [result.dedup_key] + [a.dedup_key for a in result.alternatives]
        assert len(keys) == len(set(keys))
        assert [(a.niu_rank, a.two_card_group) for a in result.alternatives] == [
            (0, (4, 6)),
            (7, (4, 3)),
        ]

    def test_alternatives_have_no_alternatives(self):
        result = evaluate("9H 6S 5D 7C 4H")
        assert all(a.alternatives == () for a in result.alternatives)


class TestInvariants:
    """性质测试"""

    HANDS = [
        "9H 6S 5D 7C 4H",
        "KH KS QD 4C 6H",
        "AS KH QD JC 9S",
        "3H 3D 6C 6S KH",
        "KH QD 9C 8S 4H",
        "AH 2D 2C 2S 3H",
    ]

    @pytest.mark.parametrize("text", HANDS)
    def test_permutation_invariance(self, text):
        cards = parse_cards(text)
        expected = NiuNiuEvaluator.evaluate(cards)
        for perm in itertools.permutations(cards):
            assert NiuNiuEvaluator.evaluate(list(perm)) == expected

    @pytest.mark.parametrize("text", HANDS)
    def test_idempotent(self, text):
        cards = parse_cards(text)
        assert NiuNiuEvaluator.evaluate(cards) == NiuNiuEvaluator.evaluate(cards)

    @pytest.mark.parametrize("text", HANDS)
    def test_group_sums(self, text):
        result = evaluate(text)
        for r in (result,) + result.alternatives:
            if r.hand_type != HandType.NIU:
                continue
            assert len(r.three_card_group) == 3
            assert len(r.two_card_group) == 2
            assert sum(r.three_card_group) % 10 == 0
            assert sum(r.two_card_group) % 10 == r.niu_rank

    def test_evaluate_hand_alias(self):
        cards = parse_cards("9H 6S 5D 7C 4H")
        assert evaluate_hand(cards) == NiuNiuEvaluator.evaluate(cards)

"""
牌型的中英文名称与说明
"""
from .niuniu import NiuNiuResult, HandType

LANGUAGES = ("en", "zh")

SPECIAL_NAMES = {
    HandType.SUPREME_SPADE_ACE: ("Supreme Spade Ace", "至尊黑桃A"),
    HandType.FIVE_FACE_CARDS: ("Five Face Cards (Bomb)", "五花牛 (炸弹)"),
    HandType.FIVE_SMALL_CARDS: ("Five Small Cards", "五小牛"),
}

SPECIAL_DESCRIPTIONS = {
    HandType.SUPREME_SPADE_ACE: ("Spade Ace with Face Card + Tens!", "黑桃A配公仔牌 + 十！"),
    HandType.FIVE_FACE_CARDS: ("All five cards are face cards!", "五张牌都是公仔牌！"),
    HandType.FIVE_SMALL_CARDS: ("All cards under 5 with sum ≤ 10!", "五张牌都小于5且总和≤10！"),
}


def _check_lang(lang: str) -> int:
    if lang not in LANGUAGES:
        raise ValueError(f"Unknown language: {lang!r}, expected one of {LANGUAGES}")
    return LANGUAGES.index(lang)


def _pair_label(result: NiuNiuResult) -> str:
    return result.pair_cards[0].label if result.pair_cards else str(result.two_card_group[0])


def hand_type_name(result: NiuNiuResult, lang: str = "en") -> str:
    """
    牌型名称

    Args:
        result: 判定结果
        lang: "en" 或 "zh"

    Returns:
        如 "Niu 7", "Niu Niu (Double)", "牛牛", "没牛"
    """
    idx = _check_lang(lang)

    if result.is_special:
        return SPECIAL_NAMES[result.hand_type][idx]
    if not result.has_niu:
        return ("No Niu", "没牛")[idx]

    if result.niu_rank == 0:
        en, zh = "Niu Niu", "牛牛"
    else:
        en, zh = f"Niu {result.niu_rank}", f"牛{result.niu_rank}"

    if result.strict_pair:
        en, zh = f"{en} (Double)", f"{zh} ({_pair_label(result)}对)"
    return (en, zh)[idx]


def describe(result: NiuNiuResult, lang: str = "en") -> str:
    """牌型说明文字"""
    idx = _check_lang(lang)

    if result.is_special:
        return SPECIAL_DESCRIPTIONS[result.hand_type][idx]
    if not result.has_niu:
        return (
            "Cannot form a group of 3 cards summing to 10",
            "无法组成三张牌总和为10的倍数",
        )[idx]

    label = _pair_label(result)
    total = result.pair_sum
    if result.niu_rank == 0:
        if result.strict_pair:
            return (
                f"Result is Niu Niu! And it's a Double {label}s!",
                f"牛牛！而且是{label}对子！",
            )[idx]
        return ("Both groups sum to multiples of 10!", "两组都是10的倍数！")[idx]

    if result.strict_pair:
        return (f"Double {label}s (Sum {total})", f"{label}对 (总和{total})")[idx]
    return (
        f"Three cards sum to 10, remaining cards sum to {total}",
        f"三张牌总和为10的倍数，剩余两张总和为{total}",
    )[idx]


def format_niu_rank(result: NiuNiuResult) -> str:
    """
    牛几的显示形式

    牛牛显示为 "10 (Niu Niu)"，牛一到牛九显示数字，
    特殊牌型显示英文名，没牛显示 "-"
    """
    if result.is_special:
        return SPECIAL_NAMES[result.hand_type][0]
    if not result.has_niu:
        return "-"
    if result.niu_rank == 0:
        return "10 (Niu Niu)"
    return str(result.niu_rank)

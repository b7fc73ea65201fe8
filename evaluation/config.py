"""
统计配置
"""
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass
class SurveyConfig:
    """
    牌型分布统计配置

    Attributes:
        num_hands: 发牌手数
        seed: 随机种子，None 表示不固定
        log_every: 每多少手打印一次进度，0 表示不打印
    """
    num_hands: int = 10000
    seed: Optional[int] = None
    log_every: int = 0

    def __post_init__(self):
        if self.num_hands < 0:
            raise ValueError(f"num_hands must be non-negative, got {self.num_hands}")
        if self.log_every < 0:
            raise ValueError(f"log_every must be non-negative, got {self.log_every}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'SurveyConfig':
        valid_keys = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        return cls(**filtered)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

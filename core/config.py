"""
求解器配置
"""
from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass
class SolverConfig:
    """
    算式求解配置

    Attributes:
        tolerance: 结果与目标值的容差
        max_operands: 最多数字个数 (搜索量随个数急剧增长)
        default_target: 脚本默认目标值
        display_limit: 脚本最多显示的解数
    """
    tolerance: float = 1e-6
    max_operands: int = 5
    default_target: float = 24
    display_limit: int = 50

    def __post_init__(self):
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.max_operands < 1:
            raise ValueError(f"max_operands must be at least 1, got {self.max_operands}")
        if self.display_limit < 0:
            raise ValueError(f"display_limit must be non-negative, got {self.display_limit}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'SolverConfig':
        """从字典创建配置 (忽略未知字段)"""
        valid_keys = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        return cls(**filtered)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

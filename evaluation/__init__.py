"""
Evaluation Layer - 统计框架

Modules:
    survey: 牌型分布统计
    config: 统计配置
"""
from .config import SurveyConfig
from .survey import SurveyResult, HandSurvey

__all__ = [
    "SurveyConfig",
    "SurveyResult",
    "HandSurvey",
]

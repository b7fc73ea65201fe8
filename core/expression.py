"""
算式搜索 (算 24 一类的目标数谜题)

给定若干数字和目标值，穷举所有用完每个数字恰好一次、
只用加减乘除、完全加括号的算式，结果与目标值误差小于容差即为解

搜索产出表达式树，字符串由 format_expression 单独生成
"""
from enum import Enum
from dataclasses import dataclass
from typing import List, Union, Sequence, Iterator, Optional
import logging

from .config import SolverConfig

logger = logging.getLogger(__name__)

Number = Union[int, float]


class TooManyOperandsError(ValueError):
    """数字个数超过上限"""


class Operator(Enum):
    """二元运算符"""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def apply(self, a: Number, b: Number) -> Number:
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUB:
            return a - b
        if self is Operator.MUL:
            return a * b
        return a / b


@dataclass(frozen=True, slots=True)
class Leaf:
    """叶子节点: 一个输入数字"""
    value: Number
    text: str

    @classmethod
    def of(cls, value: Number) -> 'Leaf':
        return cls(value=value, text=format_number(value))

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class BinaryOp:
    """二元运算节点 (value 在构造时算好)"""
    op: Operator
    left: 'Expr'
    right: 'Expr'
    value: Number

    @classmethod
    def combine(cls, op: Operator, left: 'Expr', right: 'Expr') -> 'BinaryOp':
        return cls(op=op, left=left, right=right, value=op.apply(left.value, right.value))

    def __str__(self) -> str:
        return format_expression(self)


Expr = Union[Leaf, BinaryOp]


def format_number(value: Number) -> str:
    """数字的文本形式，整数值的浮点数不带 .0"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_expression(expr: Expr) -> str:
    """
    表达式树转字符串

    叶子输出自身文本，运算节点输出 "(左 op 右)"
    """
    if isinstance(expr, Leaf):
        return expr.text
    return f"({format_expression(expr.left)} {expr.op.value} {format_expression(expr.right)})"


def leaves(expr: Expr) -> List[Leaf]:
    """按从左到右的顺序返回所有叶子"""
    if isinstance(expr, Leaf):
        return [expr]
    return leaves(expr.left) + leaves(expr.right)


def combinations(a: Expr, b: Expr) -> Iterator[BinaryOp]:
    """
    两个表达式的所有可用组合

    顺序: a+b, a-b, b-a, a*b, a/b, b/a
    除数恰好为 0 的除法不生成
    """
    yield BinaryOp.combine(Operator.ADD, a, b)
    yield BinaryOp.combine(Operator.SUB, a, b)
    yield BinaryOp.combine(Operator.SUB, b, a)
    yield BinaryOp.combine(Operator.MUL, a, b)
    if b.value != 0:
        yield BinaryOp.combine(Operator.DIV, a, b)
    if a.value != 0:
        yield BinaryOp.combine(Operator.DIV, b, a)


class ExpressionSolver:
    """
    穷举 DFS 求解器

    每一步任选两个表达式合并为一个，直到只剩一个；
    不做去重、排序或截断 (代数等价的写法会重复出现)
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()

    def solve(self, operands: Sequence[Number], target: Number) -> List[str]:
        """
        求所有解的字符串

        Args:
            operands: 数字 (最多 config.max_operands 个)
            target: 目标值

        Returns:
            解的列表，可能为空
        """
        return [format_expression(expr) for expr in self.solve_trees(operands, target)]

    def solve_trees(self, operands: Sequence[Number], target: Number) -> List[Expr]:
        """
        求所有解的表达式树

        Args:
            operands: 数字
            target: 目标值

        Returns:
            表达式树列表
        """
        if len(operands) > self.config.max_operands:
            raise TooManyOperandsError(
                f"At most {self.config.max_operands} operands supported, got {len(operands)}"
            )
        if not operands:
            return []

        results: List[Expr] = []
        self._search([Leaf.of(v) for v in operands], target, results)
        logger.debug("solve %s -> %s: %d solutions", list(operands), target, len(results))
        return results

    def _search(self, items: List[Expr], target: Number, results: List[Expr]):
        n = len(items)
        if n == 1:
            if abs(items[0].value - target) < self.config.tolerance:
                results.append(items[0])
            return

        for i in range(n):
            for j in range(i + 1, n):
                remaining = [items[k] for k in range(n) if k != i and k != j]
                for node in combinations(items[i], items[j]):
                    self._search(remaining + [node], target, results)


def solve(operands: Sequence[Number], target: Number, tolerance: float = 1e-6) -> List[str]:
    """求所有解 (使用默认上限与指定容差)"""
    return ExpressionSolver(SolverConfig(tolerance=tolerance)).solve(operands, target)

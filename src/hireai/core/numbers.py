"""数值小工具：四舍五入（.5 向上）与 0–100 分数钳制。"""
import math
from typing import Any


def round_half_up(value: float) -> int:
    """与前端 Math.round 一致：2.5 → 3，-2.5 → -2。Python 内置 round 是银行家舍入，不能直接用。"""
    return int(math.floor(value + 0.5))


def clamp_score(value: Any) -> int:
    """任意模型输出 → [0, 100] 的整数分；缺失或非数值记 0。"""
    if isinstance(value, bool):
        return 0
    # 整数直接比较：超大整数转 float 会 OverflowError
    if isinstance(value, int):
        return min(100, max(0, value))
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(number):
        return 0
    if math.isinf(number):
        return 100 if number > 0 else 0
    return min(100, max(0, round_half_up(number)))

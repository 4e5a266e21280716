#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
神煞计算模块

- evaluators: 通用判定器（查表、组合、重复、冲害、旬空）
- rules: 按固定顺序注册的神煞规则
- engine: 校验输入、执行规则、排序
"""

from .engine import calculate_shensha
from .rules import RULES, TYPE_ORDER, ShenShaRule

__all__ = [
    'calculate_shensha',
    'RULES',
    'TYPE_ORDER',
    'ShenShaRule',
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
神煞计算引擎

输入四柱（只用到天干、地支），逐条执行 RULES，按吉、中、凶稳定排序。
任一天干或地支无效时返回空列表，不抛异常。
"""

import logging
from typing import Callable, List, Optional

from core.data.constants import is_valid_branch, is_valid_stem
from core.models import BaZiShenSha

from .evaluators import FourPillars
from .rules import RULES, TYPE_ORDER

logger = logging.getLogger(__name__)

WarningSink = Callable[[str], None]

_STEM_FIELDS = ('年干', '月干', '日干', '时干')
_BRANCH_FIELDS = ('年支', '月支', '日支', '时支')


def _emit_warning(message: str, warn: Optional[WarningSink]) -> None:
    logger.warning(message)
    if warn is None:
        return
    try:
        warn(message)
    except Exception as e:
        logger.error(f"神煞警告回调执行失败: {e}")


def _validate(stems, branches, warn: Optional[WarningSink]) -> bool:
    for value, name in zip(stems, _STEM_FIELDS):
        if not is_valid_stem(value):
            _emit_warning(f"神煞计算警告：无效的{name}「{value}」", warn)
            return False
    for value, name in zip(branches, _BRANCH_FIELDS):
        if not is_valid_branch(value):
            _emit_warning(f"神煞计算警告：无效的{name}「{value}」", warn)
            return False
    return True


def calculate_shensha(year_pillar, month_pillar, day_pillar, hour_pillar,
                      warn: Optional[WarningSink] = None) -> List[BaZiShenSha]:
    """
    计算八字神煞

    Args:
        year_pillar / month_pillar / day_pillar / hour_pillar:
            具有 heavenly_stem、earthly_branch 属性的柱对象（如 Pillar）
        warn: 可选的警告回调，输入无效时收到警告文本

    Returns:
        List[BaZiShenSha]: 按吉、中、凶排序的神煞列表，同类型内保持规则顺序
    """
    pillars = (year_pillar, month_pillar, day_pillar, hour_pillar)
    stems = tuple(getattr(p, 'heavenly_stem', None) for p in pillars)
    branches = tuple(getattr(p, 'earthly_branch', None) for p in pillars)

    if not _validate(stems, branches, warn):
        return []

    chart = FourPillars(stems=stems, branches=branches)
    results = []
    for rule in RULES:
        positions = rule.evaluate(chart)
        if positions:
            results.append(BaZiShenSha(
                name=rule.name,
                type=rule.type,
                description=rule.description,
                positions=list(positions),
            ))

    # sorted() 为稳定排序
    return sorted(results, key=lambda item: TYPE_ORDER[item.type])

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行分析器

功能：
- 统计四柱八个干支的五行分布
- 找出缺失、最旺的五行
- 判断日主强弱（同类 vs 异类）
- 推算喜用与忌讳五行
"""

import logging
from typing import Dict, List, Optional

from core.calculators.bazi_core.element_relations import (
    ELEMENT_RELATIONS,
    get_draining_elements,
    get_supporting_elements,
)
from core.data.constants import BRANCH_ELEMENTS, FIVE_ELEMENTS, STEM_ELEMENTS
from core.models import DayMasterInfo, DayMasterStrength, FavorableElements

logger = logging.getLogger(__name__)


class WuxingBalanceAnalyzer:
    """五行分析器"""

    # 单个五行数量 -> 旺衰标签（>=4 为极旺）
    ELEMENT_STRENGTH_LABELS = ('缺', '弱', '平', '旺')
    ELEMENT_STRENGTH_MAX_LABEL = '极旺'

    # 日主强弱阈值（差值 = 同类 - 异类）
    DAY_MASTER_THRESHOLDS = {
        'very_strong': 3,    # 极强（>=3）
        'strong': 2,         # 偏强（2）
        'balanced': -1,      # 中和（-1 ~ 1）
        'weak': -3,          # 偏弱（-3 ~ -2）
        # 极弱（< -3）
    }

    @staticmethod
    def count_elements(stems: List[str], branches: List[str]) -> Dict[str, int]:
        """
        统计天干、地支的五行数量

        Args:
            stems: 四柱天干
            branches: 四柱地支

        Returns:
            {"木": 2, "火": 1, "土": 3, "金": 1, "水": 1}，未知干支不计入
        """
        counts = {element: 0 for element in FIVE_ELEMENTS}
        for stem in stems:
            element = STEM_ELEMENTS.get(stem)
            if element:
                counts[element] += 1
        for branch in branches:
            element = BRANCH_ELEMENTS.get(branch)
            if element:
                counts[element] += 1
        return counts

    @staticmethod
    def get_missing_elements(counts: Dict[str, int]) -> List[str]:
        return [element for element in FIVE_ELEMENTS if counts.get(element, 0) == 0]

    @staticmethod
    def get_strongest_elements(counts: Dict[str, int]) -> List[str]:
        """数量最多的五行（并列时全部返回，全为 0 时五行并列）"""
        max_count = max(counts.get(element, 0) for element in FIVE_ELEMENTS)
        return [element for element in FIVE_ELEMENTS if counts.get(element, 0) == max_count]

    @staticmethod
    def get_element_strength_label(count: int) -> str:
        labels = WuxingBalanceAnalyzer.ELEMENT_STRENGTH_LABELS
        if count >= len(labels):
            return WuxingBalanceAnalyzer.ELEMENT_STRENGTH_MAX_LABEL
        return labels[max(count, 0)]

    @staticmethod
    def get_day_master_info(day_stem: str) -> Optional[DayMasterInfo]:
        """日主信息，如 己 -> 己土；无效天干返回 None"""
        element = STEM_ELEMENTS.get(day_stem)
        if not element:
            return None
        return DayMasterInfo(stem=day_stem, element=element, display_name=f"{day_stem}{element}")

    @staticmethod
    def calculate_day_master_strength(day_element: str, counts: Dict[str, int]) -> DayMasterStrength:
        """
        判断日主强弱

        同类 = 生我 + 同我；异类 = 我生 + 克我 + 我克。
        同类 >= 异类 为身强。

        Args:
            day_element: 日主五行
            counts: 五行统计

        Returns:
            DayMasterStrength
        """
        if day_element not in ELEMENT_RELATIONS:
            raise ValueError(f"无效的日主五行: {day_element}")

        same_type = sum(counts.get(e, 0) for e in get_supporting_elements(day_element))
        different_type = sum(counts.get(e, 0) for e in get_draining_elements(day_element))
        diff = same_type - different_type

        thresholds = WuxingBalanceAnalyzer.DAY_MASTER_THRESHOLDS
        if diff >= thresholds['very_strong']:
            label = '极强'
        elif diff >= thresholds['strong']:
            label = '偏强'
        elif diff >= thresholds['balanced']:
            label = '中和'
        elif diff >= thresholds['weak']:
            label = '偏弱'
        else:
            label = '极弱'

        return DayMasterStrength(
            is_strong=same_type >= different_type,
            same_type_count=same_type,
            different_type_count=different_type,
            strength_label=label,
        )

    @staticmethod
    def calculate_favorable_elements(day_element: str, strength: DayMasterStrength) -> FavorableElements:
        """
        推算喜用、忌讳五行

        身强喜泄耗（我生、克我、我克），忌生扶（生我、同我）；身弱相反。
        """
        supporting = get_supporting_elements(day_element)
        draining = get_draining_elements(day_element)

        if strength.is_strong:
            return FavorableElements(
                favorable=draining,
                unfavorable=supporting,
                explanation=f"日主{strength.strength_label}，喜泄耗，忌生扶",
            )
        return FavorableElements(
            favorable=supporting,
            unfavorable=draining,
            explanation=f"日主{strength.strength_label}，喜生扶，忌泄耗",
        )

    @staticmethod
    def analyze(stems: List[str], branches: List[str]) -> Dict:
        """
        完整五行分析

        Returns:
            {
                "counts": {...},
                "missing": [...],
                "strongest": [...],
                "labels": {"木": "平", ...},
                "day_master": DayMasterInfo,
                "strength": DayMasterStrength,
                "favorable": FavorableElements,
            }
        """
        counts = WuxingBalanceAnalyzer.count_elements(stems, branches)
        day_master = WuxingBalanceAnalyzer.get_day_master_info(stems[2])

        strength = None
        favorable = None
        if day_master:
            strength = WuxingBalanceAnalyzer.calculate_day_master_strength(day_master.element, counts)
            favorable = WuxingBalanceAnalyzer.calculate_favorable_elements(day_master.element, strength)
            logger.info(
                f"日主{day_master.display_name}: 同类{strength.same_type_count} "
                f"异类{strength.different_type_count} -> {strength.strength_label}"
            )

        return {
            'counts': counts,
            'missing': WuxingBalanceAnalyzer.get_missing_elements(counts),
            'strongest': WuxingBalanceAnalyzer.get_strongest_elements(counts),
            'labels': {e: WuxingBalanceAnalyzer.get_element_strength_label(c) for e, c in counts.items()},
            'day_master': day_master,
            'strength': strength,
            'favorable': favorable,
        }

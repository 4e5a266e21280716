#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十神分析器
为四柱天干及全部藏干标注十神，并统计十神出现次数
"""

import logging
from collections import Counter
from typing import Dict

from core.calculators.bazi_core.ten_gods import TEN_GOD_NAMES, get_branch_ten_gods, get_main_star
from core.models import Pillar

logger = logging.getLogger(__name__)


class TenGodsAnalyzer:
    """十神分析器"""

    @staticmethod
    def annotate_pillars(pillars: Dict[str, Pillar]) -> Dict[str, Pillar]:
        """
        就地标注十神

        年、月、时柱天干得到十神；日柱天干为日主，ten_god 保持 None。
        每一柱的每个藏干都按日主计算十神。

        Args:
            pillars: {'year': Pillar, 'month': Pillar, 'day': Pillar, 'hour': Pillar}

        Returns:
            同一个字典
        """
        day_stem = pillars['day'].heavenly_stem
        for pillar_type, pillar in pillars.items():
            pillar.ten_god = get_main_star(day_stem, pillar.heavenly_stem, pillar_type)
            pillar.hidden_ten_gods = get_branch_ten_gods(day_stem, pillar.earthly_branch)
        return pillars

    @staticmethod
    def count_ten_gods(pillars: Dict[str, Pillar]) -> Dict[str, int]:
        """统计天干与藏干十神出现次数（十种均列出，未出现为 0）"""
        counter = Counter()
        for pillar in pillars.values():
            if pillar.ten_god:
                counter[pillar.ten_god] += 1
            counter.update(pillar.hidden_ten_gods)
        stats = {name: counter.get(name, 0) for name in TEN_GOD_NAMES}
        logger.debug(f"十神统计: {stats}")
        return stats

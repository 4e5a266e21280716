#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十神计算模块

十神由两点决定：目标天干五行相对日主的生克关系，以及阴阳是否相同。
"""

from typing import List, Optional

from core.data.constants import HIDDEN_STEMS, STEM_ELEMENTS, STEM_YINYANG

from .element_relations import get_element_relation

# (关系, 阴阳相同) -> 十神
TEN_GOD_TABLE = {
    ('same', True): '比肩',
    ('same', False): '劫财',
    ('me_producing', True): '食神',
    ('me_producing', False): '伤官',
    ('me_controlling', True): '偏财',
    ('me_controlling', False): '正财',
    ('controlling_me', True): '七杀',
    ('controlling_me', False): '正官',
    ('producing_me', True): '偏印',
    ('producing_me', False): '正印',
}

TEN_GOD_NAMES = ('比肩', '劫财', '食神', '伤官', '偏财', '正财', '七杀', '正官', '偏印', '正印')


def get_ten_god(day_stem: str, target_stem: str) -> str:
    """
    计算目标天干相对日主的十神

    Args:
        day_stem: 日干
        target_stem: 目标天干

    Returns:
        str: 十神名称

    Raises:
        ValueError: 天干无效
    """
    if day_stem not in STEM_ELEMENTS or target_stem not in STEM_ELEMENTS:
        raise ValueError(f"无效的天干: {day_stem}, {target_stem}")

    relation = get_element_relation(STEM_ELEMENTS[day_stem], STEM_ELEMENTS[target_stem])
    same_yinyang = STEM_YINYANG[day_stem] == STEM_YINYANG[target_stem]
    return TEN_GOD_TABLE[(relation, same_yinyang)]


def get_main_star(day_stem: str, target_stem: str, pillar_type: str) -> Optional[str]:
    """
    计算天干十神（主星）

    日柱天干为日主本身，不计十神，返回 None。
    """
    if pillar_type == 'day':
        return None
    return get_ten_god(day_stem, target_stem)


def get_branch_ten_gods(day_stem: str, branch: str) -> List[str]:
    """计算地支藏干的十神（副星），顺序与藏干一致"""
    return [get_ten_god(day_stem, hidden_stem) for hidden_stem in HIDDEN_STEMS.get(branch, ())]

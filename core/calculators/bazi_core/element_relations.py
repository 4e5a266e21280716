#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行生克关系模块

生：木→火→土→金→水→木；克：木→土→水→火→金→木。
"""

from types import MappingProxyType
from typing import List, Literal

# 相对日主的五行关系
RelationType = Literal['same', 'me_producing', 'me_controlling', 'producing_me', 'controlling_me']

ELEMENT_RELATIONS = MappingProxyType({
    '木': {'produces': '火', 'controls': '土', 'produced_by': '水', 'controlled_by': '金'},
    '火': {'produces': '土', 'controls': '金', 'produced_by': '木', 'controlled_by': '水'},
    '土': {'produces': '金', 'controls': '水', 'produced_by': '火', 'controlled_by': '木'},
    '金': {'produces': '水', 'controls': '木', 'produced_by': '土', 'controlled_by': '火'},
    '水': {'produces': '木', 'controls': '火', 'produced_by': '金', 'controlled_by': '土'},
})


def get_element_relation(day_element: str, target_element: str) -> RelationType:
    """
    判断目标五行相对日主五行的关系

    Args:
        day_element: 日主五行
        target_element: 目标五行

    Returns:
        RelationType: 'same' 同我 / 'me_producing' 我生 / 'me_controlling' 我克 /
                      'producing_me' 生我 / 'controlling_me' 克我

    Raises:
        ValueError: 任一五行无效
    """
    if day_element not in ELEMENT_RELATIONS or target_element not in ELEMENT_RELATIONS:
        raise ValueError(f"无效的五行: {day_element}, {target_element}")

    if day_element == target_element:
        return 'same'

    relations = ELEMENT_RELATIONS[day_element]
    if target_element == relations['produces']:
        return 'me_producing'
    if target_element == relations['controls']:
        return 'me_controlling'
    if target_element == relations['produced_by']:
        return 'producing_me'
    return 'controlling_me'


def get_supporting_elements(element: str) -> List[str]:
    """生扶（同类）：生我者、同我者"""
    return [ELEMENT_RELATIONS[element]['produced_by'], element]


def get_draining_elements(element: str) -> List[str]:
    """泄耗（异类）：我生者、克我者、我克者"""
    relations = ELEMENT_RELATIONS[element]
    return [relations['produces'], relations['controlled_by'], relations['controls']]

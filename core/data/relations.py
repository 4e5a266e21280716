#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
干支关系常量

天干五合、地支六冲、六害、三合局、三刑与自刑。
"""

from types import MappingProxyType

# 天干五合
STEM_HE = MappingProxyType({
    '甲': '己', '己': '甲',
    '乙': '庚', '庚': '乙',
    '丙': '辛', '辛': '丙',
    '丁': '壬', '壬': '丁',
    '戊': '癸', '癸': '戊',
})

# 地支六冲（相隔六位）
BRANCH_CHONG = MappingProxyType({
    '子': '午', '丑': '未', '寅': '申', '卯': '酉', '辰': '戌', '巳': '亥',
    '午': '子', '未': '丑', '申': '寅', '酉': '卯', '戌': '辰', '亥': '巳',
})

# 地支六害
BRANCH_HAI = MappingProxyType({
    '子': '未', '丑': '午', '寅': '巳', '卯': '辰', '申': '亥', '酉': '戌',
    '未': '子', '午': '丑', '巳': '寅', '辰': '卯', '亥': '申', '戌': '酉',
})

# 地支三合局
BRANCH_SANHE_GROUPS = (
    ('申', '子', '辰'),
    ('寅', '午', '戌'),
    ('巳', '酉', '丑'),
    ('亥', '卯', '未'),
)

# 三刑（需全部地支出现）
BRANCH_XING = MappingProxyType({
    '寅巳申': ('寅', '巳', '申'),  # 恃势之刑
    '丑戌未': ('丑', '戌', '未'),  # 无恩之刑
    '子卯': ('子', '卯'),          # 无礼之刑
})

# 自刑
BRANCH_ZIXING = ('辰', '午', '酉', '亥')


def triad_table(targets):
    """
    由三合局目标生成 12 地支查询表

    Args:
        targets: 与 BRANCH_SANHE_GROUPS 顺序一致的 4 个目标地支

    Returns:
        MappingProxyType: {地支: 目标地支}
    """
    table = {}
    for group, target in zip(BRANCH_SANHE_GROUPS, targets):
        for branch in group:
            table[branch] = target
    return MappingProxyType(table)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字基础常量

天干、地支、五行、阴阳、地支藏干、六十甲子纳音等静态数据。
所有表均为模块级只读常量，可被多线程并发读取。
"""

from types import MappingProxyType

# 天干
HEAVENLY_STEMS = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')

# 地支
EARTHLY_BRANCHES = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')

# 五行（固定顺序：木火土金水）
FIVE_ELEMENTS = ('木', '火', '土', '金', '水')

# 柱位名称
PILLAR_NAMES = ('year', 'month', 'day', 'hour')
PILLAR_LABELS = MappingProxyType({
    'year': '年柱',
    'month': '月柱',
    'day': '日柱',
    'hour': '时柱',
})

STEM_ELEMENTS = MappingProxyType({
    '甲': '木', '乙': '木',
    '丙': '火', '丁': '火',
    '戊': '土', '己': '土',
    '庚': '金', '辛': '金',
    '壬': '水', '癸': '水',
})

BRANCH_ELEMENTS = MappingProxyType({
    '寅': '木', '卯': '木',
    '巳': '火', '午': '火',
    '辰': '土', '戌': '土', '丑': '土', '未': '土',
    '申': '金', '酉': '金',
    '亥': '水', '子': '水',
})

STEM_YINYANG = MappingProxyType({
    '甲': '阳', '乙': '阴',
    '丙': '阳', '丁': '阴',
    '戊': '阳', '己': '阴',
    '庚': '阳', '辛': '阴',
    '壬': '阳', '癸': '阴',
})

# 地支藏干（本气在前）
HIDDEN_STEMS = MappingProxyType({
    '子': ('癸',),
    '丑': ('己', '癸', '辛'),
    '寅': ('甲', '丙', '戊'),
    '卯': ('乙',),
    '辰': ('戊', '乙', '癸'),
    '巳': ('丙', '庚', '戊'),
    '午': ('丁', '己'),
    '未': ('己', '丁', '乙'),
    '申': ('庚', '壬', '戊'),
    '酉': ('辛',),
    '戌': ('戊', '辛', '丁'),
    '亥': ('壬', '甲'),
})

# 六十甲子纳音
NAYIN = MappingProxyType({
    '甲子': '海中金', '乙丑': '海中金',
    '丙寅': '炉中火', '丁卯': '炉中火',
    '戊辰': '大林木', '己巳': '大林木',
    '庚午': '路旁土', '辛未': '路旁土',
    '壬申': '剑锋金', '癸酉': '剑锋金',
    '甲戌': '山头火', '乙亥': '山头火',
    '丙子': '涧下水', '丁丑': '涧下水',
    '戊寅': '城头土', '己卯': '城头土',
    '庚辰': '白蜡金', '辛巳': '白蜡金',
    '壬午': '杨柳木', '癸未': '杨柳木',
    '甲申': '泉中水', '乙酉': '泉中水',
    '丙戌': '屋上土', '丁亥': '屋上土',
    '戊子': '霹雳火', '己丑': '霹雳火',
    '庚寅': '松柏木', '辛卯': '松柏木',
    '壬辰': '长流水', '癸巳': '长流水',
    '甲午': '沙中金', '乙未': '沙中金',
    '丙申': '山下火', '丁酉': '山下火',
    '戊戌': '平地木', '己亥': '平地木',
    '庚子': '壁上土', '辛丑': '壁上土',
    '壬寅': '金箔金', '癸卯': '金箔金',
    '甲辰': '覆灯火', '乙巳': '覆灯火',
    '丙午': '天河水', '丁未': '天河水',
    '戊申': '大驿土', '己酉': '大驿土',
    '庚戌': '钗钏金', '辛亥': '钗钏金',
    '壬子': '桑柘木', '癸丑': '桑柘木',
    '甲寅': '大溪水', '乙卯': '大溪水',
    '丙辰': '沙中土', '丁巳': '沙中土',
    '戊午': '天上火', '己未': '天上火',
    '庚申': '石榴木', '辛酉': '石榴木',
    '壬戌': '大海水', '癸亥': '大海水',
})

# 六十甲子（按循环顺序）
SIXTY_JIAZI = tuple(NAYIN.keys())


def is_valid_stem(stem) -> bool:
    return isinstance(stem, str) and stem in STEM_ELEMENTS


def is_valid_branch(branch) -> bool:
    return isinstance(branch, str) and branch in BRANCH_ELEMENTS

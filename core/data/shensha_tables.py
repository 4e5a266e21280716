#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
神煞查询表

按查询键分组：
- 日干查地支（天乙、文昌、禄神、羊刃 ...）
- 日支/年支三合局查地支（桃花、驿马、华盖 ...）
- 月支查天干（天德、月德及其合神）
- 年支查地支（孤辰、寡宿、丧门、白虎 ...）
- 日柱/时柱干支组合（魁罡、阴阳差错、十恶大败 ...）

所有表为只读常量。
"""

from types import MappingProxyType

from core.data.constants import EARTHLY_BRANCHES
from core.data.relations import BRANCH_CHONG, triad_table


def shifted_table(offset: int) -> MappingProxyType:
    """地支顺数 offset 位得到的查询表（如 offset=2：子见寅、丑见卯 ...）"""
    return MappingProxyType({
        branch: EARTHLY_BRANCHES[(index + offset) % 12]
        for index, branch in enumerate(EARTHLY_BRANCHES)
    })


# ==================== 日干查地支 ====================

TIANYI_GUIREN = MappingProxyType({
    '甲': ('丑', '未'), '戊': ('丑', '未'), '庚': ('丑', '未'),
    '乙': ('子', '申'), '己': ('子', '申'),
    '丙': ('亥', '酉'), '丁': ('亥', '酉'),
    '辛': ('午', '寅'),
    '壬': ('卯', '巳'), '癸': ('卯', '巳'),
})

TAIJI = MappingProxyType({
    '甲': ('子', '午'), '乙': ('子', '午'),
    '丙': ('卯', '酉'), '丁': ('卯', '酉'),
    '戊': ('辰', '戌', '丑', '未'), '己': ('辰', '戌', '丑', '未'),
    '庚': ('寅', '亥'), '辛': ('寅', '亥'),
    '壬': ('巳', '申'), '癸': ('巳', '申'),
})

WENCHANG = MappingProxyType({
    '甲': '巳', '乙': '午', '丙': '申', '丁': '酉', '戊': '申',
    '己': '酉', '庚': '亥', '辛': '子', '壬': '寅', '癸': '卯',
})

LUSHEN = MappingProxyType({
    '甲': '寅', '乙': '卯', '丙': '巳', '丁': '午', '戊': '巳',
    '己': '午', '庚': '申', '辛': '酉', '壬': '亥', '癸': '子',
})

# 阳干才有羊刃
YANGREN = MappingProxyType({
    '甲': '卯', '丙': '午', '戊': '午', '庚': '酉', '壬': '子',
})

# 羊刃所冲之支
FEIREN = MappingProxyType({stem: BRANCH_CHONG[branch] for stem, branch in YANGREN.items()})

JINYU = MappingProxyType({
    '甲': '辰', '乙': '巳', '丙': '未', '丁': '申', '戊': '未',
    '己': '申', '庚': '戌', '辛': '亥', '壬': '丑', '癸': '寅',
})

TIANCHU = MappingProxyType({
    '甲': '巳', '乙': '午', '丙': '巳', '丁': '申', '戊': '申',
    '己': '卯', '庚': '亥', '辛': '酉', '壬': '寅', '癸': '子',
})

FUXING = MappingProxyType({
    '甲': '寅', '乙': '丑', '丙': '亥', '丁': '戌', '戊': '申',
    '己': '未', '庚': '巳', '辛': '辰', '壬': '寅', '癸': '丑',
})

GUOYIN = MappingProxyType({
    '甲': '戌', '乙': '亥', '丙': '丑', '丁': '寅', '戊': '丑',
    '己': '寅', '庚': '辰', '辛': '巳', '壬': '未', '癸': '申',
})

XUETANG = MappingProxyType({
    '甲': '亥', '乙': '午', '丙': '寅', '丁': '酉', '戊': '寅',
    '己': '酉', '庚': '巳', '辛': '子', '壬': '申', '癸': '卯',
})

CIGUAN = MappingProxyType({
    '甲': '寅', '乙': '丑', '丙': '申', '丁': '巳', '戊': '申',
    '己': '巳', '庚': '亥', '辛': '戌', '壬': '寅', '癸': '亥',
})

HONGYAN = MappingProxyType({
    '甲': '午', '乙': '申', '丙': '寅', '丁': '未', '戊': '辰',
    '己': '辰', '庚': '戌', '辛': '酉', '壬': '子', '癸': '申',
})

LIUXIA = MappingProxyType({
    '甲': '酉', '乙': '戌', '丙': '未', '丁': '申', '戊': '未',
    '己': '申', '庚': '巳', '辛': '午', '壬': '卯', '癸': '辰',
})

XUEREN = MappingProxyType({
    '甲': '卯', '乙': '辰', '丙': '午', '丁': '未', '戊': '午',
    '己': '未', '庚': '酉', '辛': '戌', '壬': '子', '癸': '丑',
})

MUYU = MappingProxyType({
    '甲': '子', '乙': '巳', '丙': '卯', '丁': '申', '戊': '卯',
    '己': '申', '庚': '午', '辛': '亥', '壬': '酉', '癸': '寅',
})

YUTANG = MappingProxyType({
    '甲': '辰', '乙': '卯', '丙': '寅', '丁': '亥', '戊': '寅',
    '己': '亥', '庚': '申', '辛': '酉', '壬': '戌', '癸': '未',
})

WENQU = MappingProxyType({
    '甲': '巳', '乙': '午', '丙': '申', '丁': '酉', '戊': '申',
    '己': '酉', '庚': '亥', '辛': '子', '壬': '寅', '癸': '卯',
})

TUNXIAN = MappingProxyType({
    '甲': '辰', '乙': '辰', '丙': '戌', '丁': '戌', '戊': '辰',
    '己': '辰', '庚': '戌', '辛': '戌', '壬': '辰', '癸': '辰',
})

TIANHUO = MappingProxyType({
    '甲': '子', '乙': '卯', '丙': '午', '丁': '酉', '戊': '子',
    '己': '卯', '庚': '午', '辛': '酉', '壬': '子', '癸': '卯',
})

JIANFENG = MappingProxyType({
    '甲': '酉', '乙': '戌', '丙': '子', '丁': '丑', '戊': '卯',
    '己': '辰', '庚': '午', '辛': '未', '壬': '酉', '癸': '戌',
})

# ==================== 三合局（日支或年支查） ====================
# 顺序：申子辰、寅午戌、巳酉丑、亥卯未

TAOHUA = triad_table(('酉', '卯', '午', '子'))
YIMA = triad_table(('寅', '申', '亥', '巳'))
HUAGAI = triad_table(('辰', '戌', '丑', '未'))
JIANGXING = triad_table(('子', '午', '酉', '卯'))
JIESHA = triad_table(('巳', '亥', '寅', '申'))
WANGSHEN = triad_table(('亥', '巳', '申', '寅'))
ZAISHA = triad_table(('午', '子', '卯', '酉'))
TIANSHA = triad_table(('戌', '辰', '丑', '未'))
DISHA = triad_table(('辰', '戌', '未', '丑'))

# ==================== 月支查天干 ====================

TIANDE = MappingProxyType({
    '寅': '丁', '卯': '申', '辰': '壬', '巳': '辛', '午': '亥', '未': '甲',
    '申': '癸', '酉': '寅', '戌': '丙', '亥': '乙', '子': '巳', '丑': '庚',
})

# 天德为地支的月份无合神
TIANDE_HE = MappingProxyType({
    '寅': '壬', '辰': '丁', '巳': '丙', '未': '己',
    '申': '戊', '戌': '辛', '亥': '庚', '丑': '乙',
})

YUEDE = triad_table(('壬', '丙', '庚', '甲'))
YUEDE_HE = triad_table(('丁', '辛', '乙', '己'))

# ==================== 月支查地支 ====================

TIANYI_DOCTOR = shifted_table(-1)
LONGDE = shifted_table(9)
FENGGE = shifted_table(3)
YUEJIANG = shifted_table(7)
# 男命表
TIESAZHOU = shifted_table(8)

# ==================== 年支查地支 ====================

GUCHEN = MappingProxyType({
    '亥': '寅', '子': '寅', '丑': '寅',
    '寅': '巳', '卯': '巳', '辰': '巳',
    '巳': '申', '午': '申', '未': '申',
    '申': '亥', '酉': '亥', '戌': '亥',
})

GUASU = MappingProxyType({
    '亥': '戌', '子': '戌', '丑': '戌',
    '寅': '丑', '卯': '丑', '辰': '丑',
    '巳': '辰', '午': '辰', '未': '辰',
    '申': '未', '酉': '未', '戌': '未',
})

TIANXI = MappingProxyType({
    '子': '酉', '丑': '申', '寅': '未', '卯': '午', '辰': '巳', '巳': '辰',
    '午': '卯', '未': '寅', '申': '丑', '酉': '子', '戌': '亥', '亥': '戌',
})

HONGLUAN = MappingProxyType({
    '子': '卯', '丑': '寅', '寅': '丑', '卯': '子', '辰': '亥', '巳': '戌',
    '午': '酉', '未': '申', '申': '未', '酉': '午', '戌': '巳', '亥': '辰',
})

ZIWEI = MappingProxyType(dict(HONGLUAN))

POSUI = MappingProxyType({
    '子': '巳', '丑': '辰', '寅': '酉', '卯': '子', '辰': '酉', '巳': '申',
    '午': '酉', '未': '戌', '申': '巳', '酉': '子', '戌': '未', '亥': '寅',
})

# 阳支与阴支各用一表，键不重叠
YUANCHEN = MappingProxyType({
    '子': '未', '寅': '酉', '辰': '亥', '午': '丑', '申': '卯', '戌': '巳',
    '丑': '午', '卯': '申', '巳': '戌', '未': '子', '酉': '寅', '亥': '辰',
})

GEJIAO = MappingProxyType({
    branch: (EARTHLY_BRANCHES[(index + 2) % 12], EARTHLY_BRANCHES[(index - 2) % 12])
    for index, branch in enumerate(EARTHLY_BRANCHES)
})

SUIXING = MappingProxyType({
    '子': ('卯',), '丑': ('戌', '未'), '寅': ('巳', '申'), '卯': ('子',),
    '辰': ('辰',), '巳': ('寅', '申'), '午': ('午',), '未': ('丑', '戌'),
    '申': ('寅', '巳'), '酉': ('酉',), '戌': ('丑', '未'), '亥': ('亥',),
})

SUIPO = BRANCH_CHONG
DAHAO = shifted_table(7)      # 岁破后一位
XIAOHAO = shifted_table(5)    # 岁破前一位
DIAOKE = shifted_table(-2)
TIANGOU = shifted_table(-2)
SANGMEN = shifted_table(2)
PIMA = shifted_table(-1)
BAIHU = shifted_table(8)
GUANFU = shifted_table(3)
WUGUI = shifted_table(4)
SIFU = shifted_table(5)
GUANSUO = shifted_table(1)
FEILIAN = shifted_table(9)
LUOHOU = shifted_table(5)
JIDU = shifted_table(-1)
TIANKU = shifted_table(-2)
TIANXU = shifted_table(7)
BAOWEI = shifted_table(8)
HUANGFAN = shifted_table(7)
LANGAN = shifted_table(3)
FUCHEN = shifted_table(5)
ZHIBEI = shifted_table(5)
JUANSHE = shifted_table(-2)
FUSHI = shifted_table(-1)
LIUE = shifted_table(3)

# ==================== 日支查地支 ====================

WANGWANG = shifted_table(5)
GUIJI = shifted_table(7)

# ==================== 旬空 ====================

KONGWANG = MappingProxyType({
    '甲子': ('戌', '亥'),
    '甲戌': ('申', '酉'),
    '甲申': ('午', '未'),
    '甲午': ('辰', '巳'),
    '甲辰': ('寅', '卯'),
    '甲寅': ('子', '丑'),
})

JIAZI_TO_XUN = MappingProxyType({
    '甲子': '甲子', '乙丑': '甲子', '丙寅': '甲子', '丁卯': '甲子', '戊辰': '甲子',
    '己巳': '甲子', '庚午': '甲子', '辛未': '甲子', '壬申': '甲子', '癸酉': '甲子',
    '甲戌': '甲戌', '乙亥': '甲戌', '丙子': '甲戌', '丁丑': '甲戌', '戊寅': '甲戌',
    '己卯': '甲戌', '庚辰': '甲戌', '辛巳': '甲戌', '壬午': '甲戌', '癸未': '甲戌',
    '甲申': '甲申', '乙酉': '甲申', '丙戌': '甲申', '丁亥': '甲申', '戊子': '甲申',
    '己丑': '甲申', '庚寅': '甲申', '辛卯': '甲申', '壬辰': '甲申', '癸巳': '甲申',
    '甲午': '甲午', '乙未': '甲午', '丙申': '甲午', '丁酉': '甲午', '戊戌': '甲午',
    '己亥': '甲午', '庚子': '甲午', '辛丑': '甲午', '壬寅': '甲午', '癸卯': '甲午',
    '甲辰': '甲辰', '乙巳': '甲辰', '丙午': '甲辰', '丁未': '甲辰', '戊申': '甲辰',
    '己酉': '甲辰', '庚戌': '甲辰', '辛亥': '甲辰', '壬子': '甲辰', '癸丑': '甲辰',
    '甲寅': '甲寅', '乙卯': '甲寅', '丙辰': '甲寅', '丁巳': '甲寅', '戊午': '甲寅',
    '己未': '甲寅', '庚申': '甲寅', '辛酉': '甲寅', '壬戌': '甲寅', '癸亥': '甲寅',
})

# ==================== 干支组合 ====================

SANQI = MappingProxyType({
    '天上三奇': ('甲', '戊', '庚'),
    '地上三奇': ('乙', '丙', '丁'),
    '人中三奇': ('壬', '癸', '辛'),
})

# (月支, 日柱)
TIANSHE = (
    (('寅', '卯'), ('戊寅',)),
    (('巳', '午'), ('甲午',)),
    (('申', '酉'), ('戊申',)),
    (('亥', '子'), ('甲子',)),
    (('辰', '戌', '丑', '未'), ('戊辰',)),
)

# 季节五行无气之日
SIFEI = (
    (('寅', '卯', '辰'), ('庚申', '辛酉')),
    (('巳', '午', '未'), ('壬子', '癸亥')),
    (('申', '酉', '戌'), ('甲寅', '乙卯')),
    (('亥', '子', '丑'), ('丙午', '丁巳')),
)

KUIGANG = ('庚辰', '庚戌', '壬辰', '戊戌')
YINYANG_CHACUO = (
    '丙子', '丁丑', '戊寅', '辛卯', '壬辰', '癸巳',
    '丙午', '丁未', '戊申', '辛酉', '壬戌', '癸亥',
)
SHIE_DABAI = ('甲辰', '乙巳', '丙申', '丁亥', '戊戌', '己丑', '庚辰', '辛巳', '壬申', '癸亥')
LIUXIU = ('丙午', '丁未', '戊子', '己丑', '癸巳', '癸酉')
BAZHUAN = ('甲寅', '乙卯', '戊辰', '己未', '庚申', '辛酉', '壬子', '癸亥')
GULUAN = ('乙巳', '丁巳', '辛亥', '戊申', '壬寅', '戊午', '壬子', '丙午', '丙子')
TIANYUAN_ZUOSHA = ('甲申', '乙酉', '丙子', '丁亥', '戊寅', '己卯', '庚午', '辛巳', '壬申', '癸酉')
JINSHEN = ('乙丑', '己巳', '癸酉')
JIUCHOU = ('庚戌', '辛亥', '壬寅', '癸巳', '丁丑', '戊子', '己卯')
BAOBAI = ('甲辰', '乙巳', '丙申', '丁亥', '戊戌', '己丑', '庚辰', '辛巳', '壬申', '癸亥')
XUANZHEN = ('甲寅', '乙卯', '丙午', '丁巳', '戊戌', '己未', '庚申', '辛酉', '壬子', '癸亥')
PINGTOU = (
    '甲申', '甲戌', '乙酉', '乙亥', '丙子', '丙寅', '丁丑', '丁卯', '戊辰', '戊午',
    '己巳', '己未', '庚午', '庚申', '辛未', '辛酉', '壬申', '壬戌', '癸酉', '癸亥',
)

# 天罗（辰）地网（戌）
TIANLUO = '辰'
DIWANG = '戌'

# 子午卯酉俱全
SIZHENG = ('子', '午', '卯', '酉')

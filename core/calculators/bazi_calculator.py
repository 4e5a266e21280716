#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字排盘主流程

流程：
1. 校验出生信息（年/月/日/时/分范围，先到先报）
2. 真太阳时校正（DST 检测 + 均时差）
3. lunar_python 按校正后时间排出四柱及农历
4. 藏干、纳音、十神
5. 五行统计、日主强弱、喜用神
6. 神煞
"""

from typing import List, Optional, Union

from core.analyzers.ten_gods_analyzer import TenGodsAnalyzer
from core.analyzers.wuxing_balance_analyzer import WuxingBalanceAnalyzer
from core.calculators.bazi_logging import safe_log
from core.calculators.LunarConverter import LunarConverter
from core.calculators.shensha import calculate_shensha
from core.calculators.true_solar_time import (
    calculate_true_solar_time,
    format_corrected_time,
    format_correction_info,
)
from core.data.cities import get_city
from core.data.constants import PILLAR_NAMES
from core.models import BaziResult, BirthInfo, Pillar, ValidationResult

GENDER_LABELS = {'male': '男', 'female': '女'}

# (字段, 最小值, 最大值, 错误信息)，按顺序校验
_RANGE_CHECKS = (
    ('year', 1900, 2100, '年份必须在1900-2100之间'),
    ('month', 1, 12, '月份必须在1-12之间'),
    ('day', 1, 31, '日期必须在1-31之间'),
    ('hour', 0, 23, '小时必须在0-23之间'),
    ('minute', 0, 59, '分钟必须在0-59之间'),
)


def validate_birth_info(birth_info: BirthInfo) -> ValidationResult:
    """
    校验出生信息范围

    只检查取值范围，不检查每月天数与闰年（由历法库判断）。
    第一个不合法的字段决定错误信息。
    """
    for field_name, low, high, message in _RANGE_CHECKS:
        value = getattr(birth_info, field_name)
        if not isinstance(value, int) or isinstance(value, bool) or not low <= value <= high:
            return ValidationResult(valid=False, error=message)
    return ValidationResult(valid=True)


class BaziChartCalculator:
    """八字排盘计算器（一次计算一个出生信息）"""

    def __init__(self, birth_info: BirthInfo):
        self.birth_info = birth_info
        self.city = birth_info.city or get_city()
        self.warnings: List[str] = []
        self.last_result: Optional[BaziResult] = None

    def calculate(self) -> BaziResult:
        """
        执行排盘（调用前需已通过 validate_birth_info）

        Raises:
            InvalidBirthDateError: 公历日期不存在（如 4 月 31 日）
            CalendarConversionError: 农历库转换失败
        """
        info = self.birth_info
        tst = calculate_true_solar_time(info.year, info.month, info.day, info.hour, info.minute, self.city)
        safe_log('info', f"🕐 {self.city.name} 真太阳时: {format_corrected_time(tst)} ({format_correction_info(tst)})")

        corrected = tst.true_solar_time
        resolved = LunarConverter.resolve_pillars(
            corrected.year, corrected.month, corrected.day,
            corrected.hour, corrected.minute, corrected.second,
        )

        pillars = self._build_pillars(resolved['bazi_pillars'])
        TenGodsAnalyzer.annotate_pillars(pillars)

        stems = [pillars[name].heavenly_stem for name in PILLAR_NAMES]
        branches = [pillars[name].earthly_branch for name in PILLAR_NAMES]
        wuxing = WuxingBalanceAnalyzer.analyze(stems, branches)

        shensha = calculate_shensha(
            pillars['year'], pillars['month'], pillars['day'], pillars['hour'],
            warn=self.warnings.append,
        )

        result = BaziResult(
            solar_date=resolved['solar_date'],
            lunar_date=resolved['lunar_date'],
            year_pillar=pillars['year'],
            month_pillar=pillars['month'],
            day_pillar=pillars['day'],
            hour_pillar=pillars['hour'],
            gender=GENDER_LABELS.get(info.gender, '男'),
            five_elements=wuxing['counts'],
            missing_elements=wuxing['missing'],
            strongest_elements=wuxing['strongest'],
            day_master=wuxing['day_master'],
            day_master_strength=wuxing['strength'],
            favorable_elements=wuxing['favorable'],
            shensha=shensha,
            ten_gods_stats=TenGodsAnalyzer.count_ten_gods(pillars),
            true_solar_time=tst,
        )
        safe_log('info', f"✅ 排盘完成: {' '.join(p.ganzhi for p in result.pillars.values())}, 神煞 {len(shensha)} 个")
        self.last_result = result
        return result

    @staticmethod
    def _build_pillars(bazi_pillars) -> dict:
        """由干支构建带藏干、纳音的四柱"""
        pillars = {}
        for name in PILLAR_NAMES:
            stem = bazi_pillars[name]['stem']
            branch = bazi_pillars[name]['branch']
            pillars[name] = Pillar(
                heavenly_stem=stem,
                earthly_branch=branch,
                hidden_stems=LunarConverter.get_hidden_stems(branch),
                nayin=LunarConverter.get_nayin(stem, branch),
            )
        return pillars


def calculate_bazi(birth_info: BirthInfo) -> Union[BaziResult, ValidationResult]:
    """
    排盘入口：先校验，校验失败直接返回 ValidationResult，不进入计算

    Returns:
        BaziResult 或 ValidationResult(valid=False)
    """
    validation = validate_birth_info(birth_info)
    if not validation.valid:
        safe_log('warning', f"⚠️  出生信息校验失败: {validation.error}")
        return validation
    return BaziChartCalculator(birth_info).calculate()

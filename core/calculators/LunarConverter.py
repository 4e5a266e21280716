#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging

from lunar_python import Solar

from core.data.constants import HIDDEN_STEMS, NAYIN, PILLAR_NAMES, is_valid_branch, is_valid_stem
from core.exceptions import CalendarConversionError

logger = logging.getLogger(__name__)


class LunarConverter:
    """农历转换工具类 - 公历时间转四柱干支与农历日期（委托 lunar_python）"""

    @staticmethod
    def resolve_pillars(year, month, day, hour, minute, second=0):
        """
        将（已校正的）公历时间转换为四柱
        Args:
            year, month, day, hour, minute, second: 公历时间
        Returns:
            dict: {
                'bazi_pillars': {'year': {'stem': '庚', 'branch': '午'}, ...},
                'solar_date': '1990-05-15',
                'lunar_date': '一九九〇年 四月廿一',
            }
        Raises:
            CalendarConversionError: 农历库无法转换或返回无效干支
        """
        solar_str = f"{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}"
        try:
            solar = Solar.fromYmdHms(year, month, day, hour, minute, second)
            lunar = solar.getLunar()
            eight_char = lunar.getEightChar()
            stems = (eight_char.getYearGan(), eight_char.getMonthGan(),
                     eight_char.getDayGan(), eight_char.getTimeGan())
            branches = (eight_char.getYearZhi(), eight_char.getMonthZhi(),
                        eight_char.getDayZhi(), eight_char.getTimeZhi())
            lunar_date = f"{lunar.getYearInChinese()}年 {lunar.getMonthInChinese()}月{lunar.getDayInChinese()}"
            solar_date = solar.toYmd()
        except Exception as e:
            logger.error(f"农历转换失败: {solar_str}, 错误: {e}")
            raise CalendarConversionError(f"农历转换失败: {solar_str}", solar_datetime=solar_str) from e

        for stem, branch in zip(stems, branches):
            if not is_valid_stem(stem) or not is_valid_branch(branch):
                raise CalendarConversionError(
                    f"农历库返回无效干支: {stem}{branch} ({solar_str})", solar_datetime=solar_str
                )

        return {
            'bazi_pillars': {
                name: {'stem': stem, 'branch': branch}
                for name, stem, branch in zip(PILLAR_NAMES, stems, branches)
            },
            'solar_date': solar_date,
            'lunar_date': lunar_date,
        }

    @staticmethod
    def get_hidden_stems(branch):
        """地支藏干（本气在前），无效地支返回空列表"""
        return list(HIDDEN_STEMS.get(branch, ()))

    @staticmethod
    def get_nayin(stem, branch):
        """六十甲子纳音，非法组合返回 None"""
        return NAYIN.get(f"{stem}{branch}")

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
均时差计算

均时差 = 真太阳时 - 平太阳时（分钟），正值表示真太阳时快于平太阳时。
采用低阶三角级数近似（Meeus），精度约数秒，全年幅度约 ±17 分钟。
"""

import math


def julian_day(year: int, month: int, day: int, hour: float = 12.0) -> float:
    """公历日期转儒略日（默认取当日正午）"""
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return (math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1))
            + day + hour / 24.0 + b - 1524.5)


def calculate_equation_of_time(year: int, month: int, day: int) -> float:
    """
    计算指定日期的均时差

    Args:
        year: 年
        month: 月
        day: 日

    Returns:
        float: 均时差（分钟）
    """
    # 自 J2000.0 起算的儒略世纪数
    t = (julian_day(year, month, day) - 2451545.0) / 36525.0

    mean_anomaly = 357.52911 + 35999.05029 * t - 0.0001537 * t * t
    mean_longitude = (280.46646 + 36000.76983 * t + 0.0003032 * t * t) % 360
    eccentricity = 0.016708634 - 0.000042037 * t - 0.0000001267 * t * t
    obliquity = 23.439291 - 0.0130042 * t - 0.00000016 * t * t + 0.000000504 * t ** 3

    y = math.tan(math.radians(obliquity) / 2) ** 2
    l0 = math.radians(mean_longitude)
    m = math.radians(mean_anomaly)
    e = eccentricity

    eot = (y * math.sin(2 * l0)
           - 2 * e * math.sin(m)
           + 4 * e * y * math.sin(m) * math.cos(2 * l0)
           - 0.5 * y * y * math.sin(4 * l0)
           - 1.25 * e * e * math.sin(2 * m))

    return 4 * math.degrees(eot)


def format_equation_of_time(minutes: float) -> str:
    """格式化均时差，如 '-14分12秒'、'+3分5秒'"""
    sign = '+' if minutes >= 0 else '-'
    total_seconds = round(abs(minutes) * 60)
    return f"{sign}{total_seconds // 60}分{total_seconds % 60}秒"

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
真太阳时计算

传统算法：真太阳时 = 当地墙上时间 + 均时差。
经度校正（经度 × 4 分钟）只作为信息返回，不参与排盘时间。
夏令时由 pytz 时区数据库判断。
"""

import logging
from datetime import datetime, timedelta

import pytz

from core.calculators.equation_of_time import calculate_equation_of_time
from core.exceptions import InvalidBirthDateError
from core.models import City, TrueSolarTimeResult

logger = logging.getLogger(__name__)


def _offset_minutes(tz, moment: datetime) -> float:
    return tz.localize(moment).utcoffset().total_seconds() / 60


def get_standard_offset(tz, year: int) -> float:
    """
    获取时区标准时间偏移（分钟）

    取当年 1 月 1 日与 7 月 1 日正午偏移的较小值，南半球时区一月处于夏令时也能得到标准偏移。
    """
    return min(
        _offset_minutes(tz, datetime(year, 1, 1, 12, 0)),
        _offset_minutes(tz, datetime(year, 7, 1, 12, 0)),
    )


def calculate_true_solar_time(year: int, month: int, day: int, hour: int, minute: int,
                              city: City) -> TrueSolarTimeResult:
    """
    计算真太阳时

    Args:
        year, month, day, hour, minute: 当地墙上时间
        city: 出生城市（经度、IANA 时区）

    Returns:
        TrueSolarTimeResult

    Raises:
        InvalidBirthDateError: 日期不存在（如 4 月 31 日），同时是 ValueError
        pytz.UnknownTimeZoneError: 时区标识无效
    """
    try:
        local_dt = datetime(year, month, day, hour, minute, 0)
    except ValueError as e:
        raise InvalidBirthDateError(f"出生日期不存在: {year}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}") from e
    tz = pytz.timezone(city.timezone)

    # 本地化（自动判断夏令时）
    localized_dt = tz.localize(local_dt)
    is_dst = bool(localized_dt.dst())
    current_offset = localized_dt.utcoffset().total_seconds() / 60
    dst_offset = current_offset - get_standard_offset(tz, year)

    utc_time = localized_dt.astimezone(pytz.UTC)

    # 经度校正仅供显示
    longitude_offset = city.longitude * 4

    # 均时差按 UTC 日期计算
    equation_of_time = calculate_equation_of_time(utc_time.year, utc_time.month, utc_time.day)

    true_solar_dt = local_dt + timedelta(seconds=round(equation_of_time * 60))

    logger.debug(
        f"真太阳时: {city.key} {local_dt} -> {true_solar_dt} "
        f"(DST={is_dst}, 均时差={equation_of_time:.2f}分)"
    )

    return TrueSolarTimeResult(
        year=true_solar_dt.year,
        month=true_solar_dt.month,
        day=true_solar_dt.day,
        hour=true_solar_dt.hour,
        minute=true_solar_dt.minute,
        second=true_solar_dt.second,
        is_dst=is_dst,
        dst_offset=dst_offset,
        longitude_offset=longitude_offset,
        equation_of_time=equation_of_time,
        utc_time=utc_time,
        mean_solar_time=local_dt,
        true_solar_time=true_solar_dt,
    )


def format_correction_info(result: TrueSolarTimeResult) -> str:
    """格式化校正信息，如 '非DST | 经度 +456.7分 | 均时差 -14.2分'"""
    dst_info = f"DST +{result.dst_offset:g}分钟" if result.is_dst else '非DST'
    longitude_info = f"经度 {result.longitude_offset:+.1f}分"
    eot_info = f"均时差 {result.equation_of_time:+.1f}分"
    return f"{dst_info} | {longitude_info} | {eot_info}"


def format_corrected_time(result: TrueSolarTimeResult) -> str:
    """格式化校正后时间，如 '2000年02月10日 14:15'"""
    return f"{result.year}年{result.month:02d}月{result.day:02d}日 {result.hour:02d}:{result.minute:02d}"

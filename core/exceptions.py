#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字计算异常定义
"""


class BaziError(Exception):
    """八字计算异常基类"""


class CalendarConversionError(BaziError):
    """历法转换失败（农历库无法处理校正后的时间）"""

    def __init__(self, message: str, solar_datetime: str = None):
        super().__init__(message)
        self.solar_datetime = solar_datetime


class InvalidBirthDateError(BaziError, ValueError):
    """出生日期时间不存在（如 4 月 31 日），属于请求参数错误"""

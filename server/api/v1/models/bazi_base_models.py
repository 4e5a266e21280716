#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字请求模型
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from core.data.cities import has_city

_DATE_PATTERN = re.compile(r'^(\d{4})-(\d{1,2})-(\d{1,2})$')
_TIME_PATTERN = re.compile(r'^(\d{1,2}):(\d{1,2})$')


class BaziBaseRequest(BaseModel):
    """排盘请求：公历日期、时间、性别、出生城市"""
    solar_date: str = Field(..., description="阳历日期，格式：YYYY-MM-DD", examples=["1990-05-15"])
    solar_time: str = Field(..., description="出生时间，格式：HH:MM", examples=["14:30"])
    gender: str = Field(..., description="性别：male(男) 或 female(女)", examples=["male"])
    city_key: Optional[str] = Field(None, description="出生城市代码（如 HKG），为空时使用默认城市", examples=["TPE"])

    @field_validator('solar_date')
    @classmethod
    def validate_date(cls, v):
        """只校验格式，数值范围交给排盘校验"""
        v = v.strip()
        if not _DATE_PATTERN.match(v):
            raise ValueError('日期格式错误，应为 YYYY-MM-DD')
        return v

    @field_validator('solar_time')
    @classmethod
    def validate_time(cls, v):
        v = v.strip()
        if not _TIME_PATTERN.match(v):
            raise ValueError('时间格式错误，应为 HH:MM')
        return v

    @field_validator('gender')
    @classmethod
    def validate_gender(cls, v):
        if v not in ('male', 'female'):
            raise ValueError('性别必须为 male 或 female')
        return v

    @field_validator('city_key')
    @classmethod
    def validate_city_key(cls, v):
        if v is None or not v.strip():
            return None
        if not has_city(v):
            raise ValueError(f'未知的城市代码: {v}')
        return v.strip().upper()

    def date_parts(self):
        """(year, month, day)"""
        return tuple(int(x) for x in _DATE_PATTERN.match(self.solar_date).groups())

    def time_parts(self):
        """(hour, minute)"""
        return tuple(int(x) for x in _TIME_PATTERN.match(self.solar_time).groups())

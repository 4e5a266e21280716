#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字排盘数据模型

输入（BirthInfo）、中间结果（TrueSolarTimeResult）与输出（BaziResult）。
输入与中间结果不可变，每次计算独立创建。
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Dict, List, Optional, Literal

Gender = Literal['male', 'female']
ShenShaType = Literal['吉', '中', '凶']


@dataclass(frozen=True)
class City:
    """城市（名称、代码、经度、时区）"""
    key: str
    name: str
    longitude: float
    timezone: str


@dataclass(frozen=True)
class BirthInfo:
    """出生信息（公历）"""
    gender: Gender
    year: int
    month: int
    day: int
    hour: int
    minute: int
    city: Optional[City] = None


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class TrueSolarTimeResult:
    """
    真太阳时校正结果

    dst_offset / longitude_offset / equation_of_time 单位均为分钟。
    utc_time 为带时区的 UTC 时间，mean_solar_time 与 true_solar_time 为当地墙上时间（naive）。
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    is_dst: bool
    dst_offset: float
    longitude_offset: float
    equation_of_time: float
    utc_time: datetime
    mean_solar_time: datetime
    true_solar_time: datetime

    def to_dict(self) -> Dict:
        data = asdict(self)
        for key in ('utc_time', 'mean_solar_time', 'true_solar_time'):
            data[key] = data[key].isoformat()
        return data


@dataclass
class Pillar:
    """一柱：天干、地支、藏干、纳音及十神"""
    heavenly_stem: str
    earthly_branch: str
    hidden_stems: List[str] = field(default_factory=list)
    nayin: Optional[str] = None
    ten_god: Optional[str] = None
    hidden_ten_gods: List[str] = field(default_factory=list)

    @property
    def ganzhi(self) -> str:
        return self.heavenly_stem + self.earthly_branch


@dataclass(frozen=True)
class BaZiShenSha:
    """神煞：名称、吉凶类型、说明、出现柱位（非空）"""
    name: str
    type: ShenShaType
    description: str
    positions: List[str]


@dataclass(frozen=True)
class DayMasterInfo:
    stem: str
    element: str
    display_name: str


@dataclass(frozen=True)
class DayMasterStrength:
    is_strong: bool
    same_type_count: int
    different_type_count: int
    strength_label: str


@dataclass(frozen=True)
class FavorableElements:
    favorable: List[str]
    unfavorable: List[str]
    explanation: str


@dataclass
class BaziResult:
    """排盘结果"""
    solar_date: str
    lunar_date: str
    year_pillar: Pillar
    month_pillar: Pillar
    day_pillar: Pillar
    hour_pillar: Pillar
    gender: str
    five_elements: Dict[str, int]
    missing_elements: List[str]
    strongest_elements: List[str]
    day_master: Optional[DayMasterInfo]
    day_master_strength: Optional[DayMasterStrength]
    favorable_elements: Optional[FavorableElements]
    shensha: List[BaZiShenSha]
    ten_gods_stats: Dict[str, int]
    true_solar_time: TrueSolarTimeResult

    @property
    def pillars(self) -> Dict[str, Pillar]:
        return {
            'year': self.year_pillar,
            'month': self.month_pillar,
            'day': self.day_pillar,
            'hour': self.hour_pillar,
        }

    def to_dict(self) -> Dict:
        """转换为可 JSON 序列化的字典"""
        return {
            'solar_date': self.solar_date,
            'lunar_date': self.lunar_date,
            'gender': self.gender,
            'pillars': {name: asdict(pillar) for name, pillar in self.pillars.items()},
            'five_elements': dict(self.five_elements),
            'missing_elements': list(self.missing_elements),
            'strongest_elements': list(self.strongest_elements),
            'day_master': asdict(self.day_master) if self.day_master else None,
            'day_master_strength': asdict(self.day_master_strength) if self.day_master_strength else None,
            'favorable_elements': asdict(self.favorable_elements) if self.favorable_elements else None,
            'shensha': [asdict(item) for item in self.shensha],
            'ten_gods_stats': dict(self.ten_gods_stats),
            'true_solar_time': self.true_solar_time.to_dict(),
        }

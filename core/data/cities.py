#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
出生城市注册表

提供真太阳时计算所需的经度与时区（IANA 时区标识）。
第一个城市为默认城市。
"""

from typing import List, Optional

from core.models import City

CITIES: List[City] = [
    City(key='TPE', name='台北 (Taipei)', longitude=121.56, timezone='Asia/Taipei'),
    City(key='HKG', name='香港 (Hong Kong)', longitude=114.17, timezone='Asia/Hong_Kong'),
    City(key='PEK', name='北京 (Beijing)', longitude=116.40, timezone='Asia/Shanghai'),
    City(key='TYO', name='东京 (Tokyo)', longitude=139.69, timezone='Asia/Tokyo'),
    City(key='SIN', name='新加坡 (Singapore)', longitude=103.81, timezone='Asia/Singapore'),
    City(key='SYD', name='悉尼 (Sydney)', longitude=151.20, timezone='Australia/Sydney'),
    City(key='LHR', name='伦敦 (London)', longitude=-0.12, timezone='Europe/London'),
    City(key='NYC', name='纽约 (New York)', longitude=-74.00, timezone='America/New_York'),
    City(key='LAX', name='洛杉矶 (Los Angeles)', longitude=-118.24, timezone='America/Los_Angeles'),
    City(key='CDG', name='巴黎 (Paris)', longitude=2.35, timezone='Europe/Paris'),
]

DEFAULT_CITY: City = CITIES[0]

_CITY_BY_KEY = {city.key: city for city in CITIES}


def get_city(key: Optional[str] = None) -> City:
    """
    按城市代码查询城市

    Args:
        key: 城市代码（如 'HKG'），大小写不敏感；为空或未知时返回默认城市

    Returns:
        City
    """
    if not key:
        return DEFAULT_CITY
    return _CITY_BY_KEY.get(key.strip().upper(), DEFAULT_CITY)


def has_city(key: Optional[str]) -> bool:
    return bool(key) and key.strip().upper() in _CITY_BY_KEY

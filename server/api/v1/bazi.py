#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字计算API接口
"""

import asyncio
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Query

from core.calculators.bazi_calculator import BaziChartCalculator, validate_birth_info
from core.calculators.shensha import calculate_shensha
from core.calculators.true_solar_time import format_corrected_time, format_correction_info
from core.data.cities import CITIES, get_city
from core.models import BirthInfo, Pillar
from server.api.v1.models.bazi_base_models import BaziBaseRequest
from server.config.app_config import get_config
from server.utils.api_error_handler import api_error_handler
from server.utils.base_models import BaseAPIResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# 排盘为纯计算，放到线程池中执行
executor = ThreadPoolExecutor(max_workers=min((os.cpu_count() or 4) * 2, 32))


class BaziRequest(BaziBaseRequest):
    """八字计算请求模型"""


class BaziResponse(BaseAPIResponse[dict]):
    """八字计算响应模型"""


def _run_calculation(birth_info: BirthInfo) -> dict:
    calculator = BaziChartCalculator(birth_info)
    result = calculator.calculate()
    data = result.to_dict()
    data['city'] = asdict(calculator.city)
    data['corrected_time'] = format_corrected_time(result.true_solar_time)
    data['correction_info'] = format_correction_info(result.true_solar_time)
    data['warnings'] = list(calculator.warnings)
    return data


@router.post("/bazi/calculate", response_model=BaziResponse, summary="计算生辰八字")
@api_error_handler
async def calculate_bazi(request: BaziRequest):
    """
    计算生辰八字

    - **solar_date**: 阳历日期 (YYYY-MM-DD)
    - **solar_time**: 出生时间 (HH:MM)
    - **gender**: 性别 (male/female)
    - **city_key**: 出生城市代码（可选，默认取 BAZI_DEFAULT_CITY）

    出生信息超出范围时返回 success=false；日期不存在返回 400。
    """
    year, month, day = request.date_parts()
    hour, minute = request.time_parts()
    city = get_city(request.city_key or get_config().default_city)
    birth_info = BirthInfo(
        gender=request.gender,
        year=year, month=month, day=day,
        hour=hour, minute=minute,
        city=city,
    )

    validation = validate_birth_info(birth_info)
    if not validation.valid:
        return BaziResponse(success=False, message=validation.error)

    loop = asyncio.get_running_loop()
    data = await loop.run_in_executor(executor, _run_calculation, birth_info)
    return BaziResponse(success=True, data=data, message="排盘成功")


@router.get("/bazi/cities", response_model=BaziResponse, summary="出生城市列表")
async def list_cities():
    return BaziResponse(
        success=True,
        data={
            'cities': [asdict(city) for city in CITIES],
            'default': get_config().default_city,
        },
    )


def _parse_ganzhi(value: str, label: str) -> Pillar:
    value = value.strip()
    if len(value) != 2:
        raise HTTPException(status_code=400, detail=f"{label}格式错误，应为两个字的干支，如 甲子")
    return Pillar(heavenly_stem=value[0], earthly_branch=value[1])


@router.get("/bazi/shensha", response_model=BaziResponse, summary="按四柱干支计算神煞")
@api_error_handler
async def query_shensha(
    year: str = Query(..., description="年柱干支", examples=["庚午"]),
    month: str = Query(..., description="月柱干支", examples=["辛巳"]),
    day: str = Query(..., description="日柱干支", examples=["庚辰"]),
    hour: str = Query(..., description="时柱干支", examples=["辛巳"]),
):
    """只运行神煞引擎；干支无效时返回空列表和警告"""
    pillars = [
        _parse_ganzhi(year, '年柱'),
        _parse_ganzhi(month, '月柱'),
        _parse_ganzhi(day, '日柱'),
        _parse_ganzhi(hour, '时柱'),
    ]
    warnings = []
    shensha = calculate_shensha(*pillars, warn=warnings.append)
    return BaziResponse(
        success=True,
        data={
            'pillars': [p.ganzhi for p in pillars],
            'shensha': [asdict(item) for item in shensha],
            'warnings': warnings,
        },
    )

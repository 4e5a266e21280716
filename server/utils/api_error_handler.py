#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
API 错误处理装饰器

InvalidBirthDateError（公历日期不存在）-> 400；
BaziError（如历法转换失败）与其他异常（含内部 ValueError）-> 500。
"""

from functools import wraps
import logging

from fastapi import HTTPException

from core.exceptions import BaziError, InvalidBirthDateError

logger = logging.getLogger(__name__)


def api_error_handler(func):
    """统一的 API 错误处理装饰器"""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except InvalidBirthDateError as e:
            logger.warning(f"请求参数错误: {e}")
            raise HTTPException(status_code=400, detail=str(e)) from e
        except BaziError as e:
            logger.error(f"排盘失败: {e}")
            raise HTTPException(status_code=500, detail=f"排盘失败: {e}") from e
        except Exception as e:
            logger.error("API error: %s", e, exc_info=True)
            raise HTTPException(status_code=500, detail=f"计算失败: {e}") from e

    return wrapper

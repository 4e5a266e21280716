#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一 API 响应模型
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar('T')


class BaseAPIResponse(BaseModel, Generic[T]):
    """{success, data, message} 响应格式"""
    model_config = ConfigDict(json_schema_extra={
        "example": {"success": True, "data": {}, "message": "排盘成功"}
    })

    success: bool = Field(..., description="是否成功")
    data: Optional[T] = Field(None, description="返回数据")
    message: Optional[str] = Field(None, description="响应消息或错误信息")

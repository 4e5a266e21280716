# -*- coding: utf-8 -*-
"""
服务器工具模块
"""

from .api_error_handler import api_error_handler
from .base_models import BaseAPIResponse

__all__ = ['api_error_handler', 'BaseAPIResponse']

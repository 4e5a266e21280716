#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字核心计算模块

提供八字计算的基础功能：
- 五行生克关系
- 十神计算
"""

from .element_relations import (
    ELEMENT_RELATIONS,
    get_element_relation,
    get_supporting_elements,
    get_draining_elements,
)
from .ten_gods import (
    get_ten_god,
    get_main_star,
    get_branch_ten_gods,
    TEN_GOD_NAMES,
)

__all__ = [
    'ELEMENT_RELATIONS',
    'get_element_relation',
    'get_supporting_elements',
    'get_draining_elements',
    'get_ten_god',
    'get_main_star',
    'get_branch_ten_gods',
    'TEN_GOD_NAMES',
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 应用与测试客户端
- 出生信息、城市、四柱等共享数据
"""

import os
import sys
from typing import Any, Dict

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from core.data.cities import get_city  # noqa: E402
from core.models import BirthInfo, Pillar  # noqa: E402


# ==================== 应用和客户端 Fixtures ====================

@pytest.fixture(scope="session")
def app():
    """FastAPI 应用实例（整个测试会话共享）"""
    from server.main import app
    return app


@pytest.fixture(scope="session")
def client(app):
    """测试客户端（整个测试会话共享）"""
    from fastapi.testclient import TestClient
    return TestClient(app)


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_bazi_request() -> Dict[str, Any]:
    """示例八字请求"""
    return {
        "solar_date": "1990-01-15",
        "solar_time": "12:30",
        "gender": "male",
    }


@pytest.fixture(scope="function")
def taipei():
    return get_city('TPE')


@pytest.fixture(scope="function")
def sample_birth_info(taipei) -> BirthInfo:
    """1990-01-15 12:30 男，台北"""
    return BirthInfo(gender='male', year=1990, month=1, day=15, hour=12, minute=30, city=taipei)


def make_pillars(*ganzhi):
    """'甲子', '乙丑', ... -> [Pillar, ...]"""
    return [Pillar(heavenly_stem=g[0], earthly_branch=g[1]) for g in ganzhi]


@pytest.fixture
def pillars_factory():
    return make_pillars

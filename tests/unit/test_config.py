#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置管理单元测试
"""

import os
from unittest.mock import patch

import pytest

from server.config.app_config import AppConfig, get_config, reload_config
from server.config.env_config import EnvConfig


class TestEnvConfig:
    """环境识别"""

    @pytest.mark.parametrize("value,expected", [
        ('local', 'local'),
        ('dev', 'local'),
        ('stage', 'staging'),
        ('prod', 'production'),
        ('PRODUCTION', 'production'),
        ('unknown', 'local'),
    ])
    def test_detect(self, value, expected):
        with patch.dict(os.environ, {'ENV': value}, clear=True):
            assert EnvConfig().env == expected

    def test_app_env_fallback(self):
        with patch.dict(os.environ, {'APP_ENV': 'staging'}, clear=True):
            config = EnvConfig()
            assert config.is_staging
            assert not config.is_production

    def test_typed_values(self):
        with patch.dict(os.environ, {'FLAG': 'yes', 'NUM': '42', 'BAD': 'abc'}, clear=True):
            config = EnvConfig()
            assert config.get_bool_config('FLAG') is True
            assert config.get_bool_config('MISSING', default=True) is True
            assert config.get_int_config('NUM') == 42
            assert config.get_int_config('BAD', default=7) == 7

    def test_required(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError):
                EnvConfig().get_config('NOT_SET', required=True)


class TestAppConfig:
    """应用配置"""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig.from_env()
            assert config.env == 'local'
            assert config.debug is False
            assert config.log_level == 'INFO'
            assert config.default_city == 'TPE'
            assert config.port == 8001

    def test_from_env(self):
        with patch.dict(os.environ, {
            'ENV': 'production',
            'DEBUG': 'true',
            'LOG_LEVEL': 'debug',
            'BAZI_DEFAULT_CITY': 'hkg',
            'PORT': '9000',
        }, clear=True):
            config = AppConfig.from_env()
            assert config.env == 'production'
            assert config.debug is True
            assert config.log_level == 'DEBUG'
            assert config.default_city == 'HKG'
            assert config.port == 9000

    def test_unknown_default_city(self):
        with patch.dict(os.environ, {'BAZI_DEFAULT_CITY': 'XXX'}, clear=True):
            assert AppConfig.from_env().default_city == 'TPE'

    def test_singleton_and_reload(self):
        with patch.dict(os.environ, {'BAZI_DEFAULT_CITY': 'SIN'}, clear=True):
            config = reload_config()
            assert get_config() is config
            assert config.default_city == 'SIN'
        reload_config()

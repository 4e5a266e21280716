#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
应用配置
所有服务配置统一从这里读取
"""

from dataclasses import dataclass
from typing import Optional

from core.data.cities import DEFAULT_CITY, has_city
from server.config.env_config import reset_env_config


@dataclass
class AppConfig:
    """应用配置"""
    env: str = 'local'
    debug: bool = False
    log_level: str = 'INFO'
    default_city: str = DEFAULT_CITY.key
    host: str = '0.0.0.0'
    port: int = 8001

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """从环境变量创建配置（未知城市代码回退到内置默认城市）"""
        env_config = reset_env_config()
        city_key = env_config.get_config('BAZI_DEFAULT_CITY', default=DEFAULT_CITY.key)
        if not has_city(city_key):
            city_key = DEFAULT_CITY.key
        return cls(
            env=env_config.env,
            debug=env_config.get_bool_config('DEBUG', default=False),
            log_level=env_config.get_config('LOG_LEVEL', default='INFO').upper(),
            default_city=city_key.strip().upper(),
            host=env_config.get_config('HOST', default='0.0.0.0'),
            port=env_config.get_int_config('PORT', default=8001),
        )


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """重新加载配置"""
    global _config
    _config = AppConfig.from_env()
    return _config

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
环境配置

识别运行环境（ENV 优先，其次 APP_ENV，默认 local），并提供带类型的环境变量读取。
"""

import logging
import os
from typing import Literal, Optional

logger = logging.getLogger(__name__)

Environment = Literal["local", "staging", "production"]

# 环境别名 -> 标准环境名
_ENV_ALIASES = {
    "local": "local",
    "dev": "local",
    "development": "local",
    "staging": "staging",
    "stage": "staging",
    "prod": "production",
    "production": "production",
}


class EnvConfig:
    """环境配置读取器"""

    def __init__(self):
        self._env: Environment = self._detect_environment()

    @staticmethod
    def _detect_environment() -> Environment:
        raw = os.getenv("ENV", os.getenv("APP_ENV", "local")).strip().lower()
        env = _ENV_ALIASES.get(raw)
        if env is None:
            logger.warning(f"⚠️  未知环境 {raw!r}，按 local 处理")
            env = "local"
        return env

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def is_local_dev(self) -> bool:
        return self._env == "local"

    @property
    def is_staging(self) -> bool:
        return self._env == "staging"

    @property
    def is_production(self) -> bool:
        return self._env == "production"

    def get_config(self, key: str, default: str = None, required: bool = False) -> Optional[str]:
        """
        读取字符串配置

        Raises:
            ValueError: required=True 且未设置
        """
        value = os.getenv(key, default)
        if required and value is None:
            raise ValueError(f"必需的环境变量 {key} 未设置")
        return value

    def get_bool_config(self, key: str, default: bool = False) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() in ("true", "1", "yes", "on")

    def get_int_config(self, key: str, default: int = 0) -> int:
        """读取整数配置，无法解析时记录警告并返回默认值"""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning(f"⚠️  环境变量 {key}={value!r} 不是整数，使用默认值 {default}")
            return default


_env_config: Optional[EnvConfig] = None


def get_env_config() -> EnvConfig:
    """获取环境配置实例（全局单例）"""
    global _env_config
    if _env_config is None:
        _env_config = EnvConfig()
    return _env_config


def reset_env_config() -> EnvConfig:
    """按当前环境变量重新识别环境"""
    global _env_config
    _env_config = EnvConfig()
    return _env_config


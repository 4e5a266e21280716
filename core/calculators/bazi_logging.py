#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字计算模块共享日志工具

提供安全的日志输出，捕获 Broken pipe 等异常。
供 bazi_calculator.py 及神煞引擎共用；服务启动时通过 setup_logging 设置级别。
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def setup_logging(level='INFO', logger_name='core'):
    """
    为核心计算包挂载 SafeStreamHandler

    Args:
        level: 日志级别名称（DEBUG/INFO/WARNING/ERROR）
        logger_name: 根日志名，默认 'core'，子模块日志自动继承

    Returns:
        logging.Logger
    """
    root = logging.getLogger(logger_name)
    if not any(isinstance(h, SafeStreamHandler) for h in root.handlers):
        handler = SafeStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.propagate = False  # 不再交给根日志重复输出
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return root


logger = logging.getLogger("core.calculators.bazi_calculator")


def safe_log(level, message):
    """
    安全的日志输出函数，捕获 Broken pipe 等异常
    在 Web 服务环境中，客户端断开连接时可能触发 Broken pipe 错误
    """
    log_func = {
        'debug': logger.debug,
        'info': logger.info,
        'warning': logger.warning,
        'error': logger.error,
    }.get(level, logger.info)
    try:
        log_func(message)
    except (BrokenPipeError, OSError):
        pass

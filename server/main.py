#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FastAPI 应用主入口
"""

import json
import logging
import os
import time
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response


# 自定义UTF-8 JSONResponse类，确保中文不被转义
class UTF8JSONResponse(Response):
    media_type = "application/json; charset=utf-8"

    def render(self, content) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")


project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# 先加载 .env，再读取配置
env_path = os.path.join(project_root, '.env')
if os.path.exists(env_path):
    load_dotenv(env_path, override=True)

from core.calculators.bazi_logging import setup_logging  # noqa: E402
from core.data.cities import get_city  # noqa: E402
from server.api.v1.bazi import router as bazi_router  # noqa: E402
from server.config.app_config import get_config  # noqa: E402

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
setup_logging(config.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logger.info(f"✓ 八字排盘服务启动: env={config.env}, 默认城市={get_city(config.default_city).name}")
    yield
    logger.info("✓ 八字排盘服务已停止")


app = FastAPI(
    title="BaZi Chart API",
    description="八字四柱排盘服务（真太阳时、五行、十神、神煞）",
    version="1.0.0",
    lifespan=lifespan,
    debug=config.debug,
    default_response_class=UTF8JSONResponse,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录请求日志，包括处理时间"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.3f}s"
    )
    response.headers["X-Process-Time"] = str(process_time)
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(bazi_router, prefix="/api/v1", tags=["八字计算"])


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "env": config.env,
        "timestamp": time.time(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "server.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )

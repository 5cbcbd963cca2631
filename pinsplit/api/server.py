"""
pinsplit FastAPI 服务

提供 RESTful API 接口
"""

import os
import time
import uuid
from typing import List, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from pinsplit.engine import (
    InvalidConfig,
    PinyinSplitter,
    SplitterConfig,
    create_splitter,
    get_api_logger,
    join_tokens,
)

# 初始化日志
logger = get_api_logger()


# ===== 请求/响应模型 =====

class SplitRequest(BaseModel):
    """切分请求"""
    text: str = Field(..., description="拼音文本")
    strategy: Optional[str] = Field(None, description="切分策略 pattern / dictionary（默认使用服务配置）")
    marker: Optional[str] = Field(None, description="音节分隔符（默认使用服务配置）")
    correct_overfetch: Optional[bool] = Field(None, description="词典策略过切纠正")
    resuffix_tone_digits: Optional[bool] = Field(None, description="数字声调回贴")


class TokenItem(BaseModel):
    """词元"""
    syllable: str
    tag: str


class SplitResponse(BaseModel):
    """切分响应"""
    text: str
    strategy: str
    marker: str
    split_text: str
    syllables: List[str]
    tokens: List[TokenItem]


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str
    version: str
    strategy: Optional[str] = None


# ===== 全局切分器实例 =====
splitter: Optional[PinyinSplitter] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    global splitter

    logger.info("pinsplit API 服务启动")
    splitter = create_splitter(SplitterConfig.from_env())
    logger.info(f"切分器就绪: strategy={splitter.strategy} marker={splitter.boundary_marker!r}")

    yield

    splitter = None
    logger.info("pinsplit API 服务已停止")


# ===== FastAPI 应用 =====
app = FastAPI(
    title="pinsplit API",
    description="汉语拼音音节切分 API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ===== 请求日志中间件 =====

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录所有请求的详细日志"""
    request_id = str(uuid.uuid4())[:8]
    start_time = time.perf_counter()

    client_ip = request.client.host if request.client else "unknown"
    logger.info(f"[{request_id}] --> {request.method} {request.url.path} | IP: {client_ip}")

    try:
        response = await call_next(request)
    except Exception as e:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.error(f"[{request_id}] <-- ERROR | {elapsed_ms:.2f}ms | {type(e).__name__}: {e}")
        raise

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    status_code = response.status_code
    log_level = "info" if status_code < 400 else "warning" if status_code < 500 else "error"
    getattr(logger, log_level)(f"[{request_id}] <-- {status_code} | {elapsed_ms:.2f}ms")

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"
    return response


def _get_splitter() -> PinyinSplitter:
    if splitter is None:
        logger.error("切分器未就绪，拒绝请求")
        raise HTTPException(status_code=503, detail="切分器未就绪")
    return splitter


def _resolve_splitter(request: SplitRequest) -> PinyinSplitter:
    """请求未覆盖任何配置时复用全局实例，否则按请求构造"""
    base = _get_splitter()
    overrides = {
        "strategy": request.strategy,
        "boundary_marker": request.marker,
        "correct_overfetch": request.correct_overfetch,
        "resuffix_tone_digits": request.resuffix_tone_digits,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return base

    current = base.config
    try:
        config = SplitterConfig(
            boundary_marker=overrides.get("boundary_marker", current.boundary_marker),
            strategy=overrides.get("strategy", current.strategy),
            correct_overfetch=overrides.get("correct_overfetch", current.correct_overfetch),
            resuffix_tone_digits=overrides.get("resuffix_tone_digits", current.resuffix_tone_digits),
            log_level=current.log_level,
        )
    except InvalidConfig as e:
        logger.warning(f"无效配置: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return create_splitter(config)


# ===== API 路由 =====

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """健康检查"""
    from pinsplit import __version__
    return HealthResponse(
        status="healthy" if splitter else "not_ready",
        version=__version__,
        strategy=splitter.strategy if splitter else None,
    )


@app.post("/split", response_model=SplitResponse)
async def split(request: SplitRequest):
    """切分拼音文本，返回标记文本、音节列表与词元"""
    active = _resolve_splitter(request)

    tokens = active.tag_text(request.text)
    marker = active.boundary_marker
    logger.debug(f"切分: '{request.text[:20]}' | strategy={active.strategy} | {len(tokens)} tokens")

    return SplitResponse(
        text=request.text,
        strategy=active.strategy,
        marker=marker,
        split_text=join_tokens(tokens, marker),
        syllables=[t.text for t in tokens if t.is_morpheme],
        tokens=[TokenItem(**t.to_dict()) for t in tokens],
    )


@app.get("/split/simple")
async def simple_split(text: str):
    """简单切分接口"""
    active = _get_splitter()
    return {"text": text, "syllables": active.list_syllables(text)}


# ===== 启动入口 =====

def main():
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    log_level = os.getenv("LOG_LEVEL", "info").lower()

    logger.info(f"启动 pinsplit API 服务: http://{host}:{port}")
    logger.info(f"API 文档: http://{host}:{port}/docs")

    uvicorn.run(
        "pinsplit.api.server:app",
        host=host,
        port=port,
        reload=False,
        workers=1,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()

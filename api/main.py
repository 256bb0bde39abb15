# api/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
import logging
from config.settings import verify_settings

from api.routers import validation

# 로깅 설정
logger = logging.getLogger("lotto_input")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 라이프스팬 컨텍스트 매니저
    - 시작 시 설정 검증
    """
    logger.info("애플리케이션 시작 중...")

    # 환경 변수 검증
    verify_settings()

    logger.info("애플리케이션 초기화 완료")

    yield  # FastAPI 애플리케이션 실행

    logger.info("애플리케이션 종료")


# FastAPI 앱 생성 (lifespan 컨텍스트 매니저 적용)
app = FastAPI(
    title="Lotto Input Validation API",
    description="로또 입력 검증 API",
    version="1.0.0",
    lifespan=lifespan
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 프로덕션 환경에서는 특정 도메인으로 제한하세요
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(validation.router, prefix="/api", tags=["validation"])


@app.get("/", tags=["root"])
async def root():
    """API 루트 엔드포인트"""
    return {
        "message": "로또 입력 검증 API에 오신 것을 환영합니다!",
        "docs_url": "/docs",
        "redoc_url": "/redoc"
    }

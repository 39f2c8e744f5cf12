import logging
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv
from sqlalchemy.orm import Session
import uvicorn

from database import check_connection, dispose_engine, get_session, init_db
from logging_config import setup_logging
from routers import contracts_router, rooms_router, tenants_router

# Load .env
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database pool at startup and close it at shutdown"""
    setup_logging()

    # Schema is managed by Alembic migrations: alembic upgrade head
    if os.getenv("AUTO_CREATE_TABLES", "false").lower() == "true":
        init_db()
        logger.info("Database tables created")

    yield

    dispose_engine()
    logger.info("Database connections closed")


# App instance
app = FastAPI(title="Rental Management API", lifespan=lifespan)

# CORS
origins = [origin for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(contracts_router)
app.include_router(rooms_router)
app.include_router(tenants_router)


# Error bodies: {"error": "<message>"}, plus "details" for validation
# errors and "message" for internal ones.
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict):
        content = exc.detail
    elif exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        content = {"error": "Route not found"}
    else:
        content = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


INVALID_ID_MESSAGES = {
    "/api/contracts": "无效的合同ID",
    "/api/rooms": "无效的房间ID",
    "/api/tenants": "无效的租客ID",
}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "数据验证失败"
    if any(error["loc"][0] == "path" for error in errors):
        for prefix, invalid_id in INVALID_ID_MESSAGES.items():
            if request.url.path.startswith(prefix):
                message = invalid_id
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message, "details": jsonable_encoder(errors)},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "服务器内部错误", "message": str(exc)},
    )


@app.get("/health")
def health_check(db: Session = Depends(get_session)):
    database_ok = check_connection(db.get_bind())
    return {"status": "healthy" if database_ok else "degraded", "database": database_ok}


if __name__ == "__main__":
    port = int(os.getenv("PORT", 10000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)

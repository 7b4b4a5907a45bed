# Shuttle Planner backend entrypoint: activities, families and the shuttles between them.

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shuttle.app.api import activities, children, parents, transports, vehicles
from shuttle.app.core.errors import BusinessRuleError, HydrationError, NotFoundError
from shuttle.app.core.logging import configure_logging
from shuttle.app.core.settings import get_settings
from shuttle.app.db.base import Base
from shuttle.app.db.session import engine

configure_logging()
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


def _sanitize(errors) -> list[dict]:
    # ctx may hold the raised ValueError, which is not JSON serializable
    return [{"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")} for err in errors]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": _sanitize(exc.errors())})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(BusinessRuleError)
async def business_rule_handler(request: Request, exc: BusinessRuleError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Storage failure on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.exception_handler(HydrationError)
async def hydration_error_handler(request: Request, exc: HydrationError):
    logger.exception("Malformed join row on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(activities.router)
app.include_router(parents.router)
app.include_router(children.router)
app.include_router(vehicles.router)
app.include_router(transports.router)


@app.get("/")
def read_root():
    return {"app": "Shuttle Planner backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


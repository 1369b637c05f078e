import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.core.config import settings
from app.core.db import create_tables
from app.core.errors import register_exception_handlers
from app.core.logging_config import configure_logging
from app.routers.auth import router as auth_router
from app.routers.food_records import router as food_records_router
from app.routers.foods import router as foods_router
from app.routers.goals import router as goals_router
from app.routers.meals import router as meals_router
from app.routers.users import router as users_router
from fastapi.middleware.cors import CORSMiddleware

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()
    logger.info("%s started", settings.APP_NAME)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(goals_router)
app.include_router(foods_router)
app.include_router(meals_router)
app.include_router(food_records_router)



@app.get("/health")
def health():
    return {"ok": True}

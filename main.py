import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from core.firebase import initialize_firebase
from core.config import settings
from api import web
from api.v1 import auth, pricing

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    initialize_firebase()
    yield


app = FastAPI(title="Markup Calculator", version=VERSION, lifespan=lifespan)

# CORS для окремого фронтенду
origins = [o.strip() for o in settings.FRONTEND_ORIGIN.split(",") if o.strip()] or [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- ПІДКЛЮЧЕННЯ РОУТЕРІВ ---
app.include_router(auth.router, prefix="/api/v1/auth", tags=["Auth"])
app.include_router(pricing.router, prefix="/api/v1/pricing", tags=["Pricing"])
app.include_router(web.router)


@app.get("/health")
def read_health():
    return {"status": "ok", "version": VERSION}

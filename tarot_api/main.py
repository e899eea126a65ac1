# tarot_api/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tarot_api.api.routes import root_routes, tarot_routes
from tarot_api.core.config import get_settings
from tarot_api.core.startup import startup_event

settings = get_settings()

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_routes.router)
app.include_router(tarot_routes.router, prefix="/cards", tags=["Tarot"])

@app.on_event("startup")
async def app_startup():
    await startup_event(app)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.lookup_routes import router as lookup_router
from .config import CORS_ORIGINS

app = FastAPI(title="Wordcraft Lexica API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(lookup_router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from buho_vectors.config import get_settings

from .routers import nodes_router


# Configure logging
logging.basicConfig(
    level=getattr(logging, get_settings().log_level, logging.INFO),
    format="%(asctime)s - %(levelname)s - %(message)s",
)


app = FastAPI(title="Buho Suite Vectors", version="0.1.0")


# CORS: allow browser apps hosted on other origins to call this API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(nodes_router)


@app.get("/health", tags=["ops"], summary="Health check")
async def health():
    return {"status": "ok"}

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from scanexpense.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Receipt scanning into reviewable expense drafts",
    version="0.1.0",
    debug=settings.DEBUG,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    return {
        "message": f"{settings.APP_NAME} API",
        "version": "0.1.0",
        "status": "running"
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

# Import routers
from scanexpense.routers import scan, review

# Include routers
app.include_router(scan.router)
app.include_router(review.router)

"""
FastAPI Main Application
Resume Text API
"""
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException, status, UploadFile, File
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from resume_text.normalize import normalize
from settings import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Resume Text API started (max_workers=%d)", settings.MAX_WORKERS)
    yield


# ============== Initialize App ==============
app = FastAPI(
    title="Resume Text API",
    description="Extracts and normalizes text from uploaded resumes",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============== Candidate Endpoints ==============

@app.post("/api/candidates/upload-resumes")
async def upload_resumes(files: Optional[List[UploadFile]] = File(None)):
    """
    Extract normalized text from one or more uploaded resumes.
    One entry per uploaded file, in upload order; "" marks a file that could not be read.
    """
    if not files:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No files uploaded"
        )

    if len(files) > settings.MAX_UPLOAD_FILES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many files (max {settings.MAX_UPLOAD_FILES})"
        )

    # Empty uploads are treated as absent documents
    buffers = [(await f.read()) or None for f in files]
    if all(b is None for b in buffers):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid file buffers found"
        )

    extracted_texts = await run_in_threadpool(
        normalize, buffers, max_workers=settings.MAX_WORKERS
    )
    logger.info(
        "Processed %d resumes (%d empty results)",
        len(extracted_texts), sum(1 for t in extracted_texts if not t)
    )

    return {
        "success": True,
        "message": "Resumes uploaded successfully",
        "data": {"extracted_texts": extracted_texts},
    }


# ============== Health Check ==============

@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Resume Text API"}


# ============== Run Instructions ==============

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8003)

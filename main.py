from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import logging

import config
from exceptions import BucketSplitError
from models import (
    BucketSnapshot,
    BucketSummary,
    DefaultPercentagesRequest,
    DefaultPercentagesResponse,
    PercentageCheck,
    PercentageCheckRequest,
    SplitPreviewRequest,
    SplitPreviewResponse,
)
from settlement_optimizer import SettlementOptimizer
from split_calculator import SplitCalculator

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Bucket Settlement API",
    description="Balances and settlement plans for shared expense buckets",
    version="1.0.0"
)

# CORS middleware to allow frontend connections
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===== API ENDPOINTS =====
@app.get("/")
async def root():
    return {"message": "Bucket Settlement API"}

@app.post("/buckets/summary", response_model=BucketSummary)
async def bucket_summary(snapshot: BucketSnapshot):
    """Calculate balances and optimal settlements for a bucket snapshot"""
    try:
        summary = SettlementOptimizer.calculate_bucket_summary(
            snapshot.bucket,
            snapshot.expenses,
            snapshot.credits,
        )
    except BucketSplitError as e:
        logger.error(f"Invalid bucket {snapshot.bucket.id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error summarizing bucket {snapshot.bucket.id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error summarizing bucket: {str(e)}")

    logger.info(
        f"Bucket {snapshot.bucket.id}: {len(snapshot.expenses)} expenses, "
        f"{len(snapshot.credits)} credits, {len(summary.settlements)} settlements"
    )
    return summary

@app.post("/splits/preview", response_model=SplitPreviewResponse)
async def preview_split(request: SplitPreviewRequest):
    """Show how a transaction would be divided before it is recorded"""
    try:
        splits = SplitCalculator.compute_split(request.transaction, request.participant_ids)
    except BucketSplitError as e:
        logger.error(f"Cannot preview split: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return {"splits": splits, "total": sum(splits.values())}

@app.post("/splits/validate", response_model=PercentageCheck)
async def validate_percentages(request: PercentageCheckRequest):
    """Check that a percentage split adds up to 100"""
    return SplitCalculator.check_percentages(request.percentages)

@app.post("/splits/default-percentages", response_model=DefaultPercentagesResponse)
async def default_percentages(request: DefaultPercentagesRequest):
    """Starting percentages for a new percentage split"""
    try:
        percentages = SplitCalculator.even_percentages(request.participant_ids)
    except BucketSplitError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"percentages": percentages}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)

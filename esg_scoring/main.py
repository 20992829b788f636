import logging
from datetime import datetime

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from esg_scoring.api.routes import esg, reports
from esg_scoring.config import get_methodology, get_settings
from esg_scoring.errors import InvalidInputError

load_dotenv()

# ================== CONFIG ==================
settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Fail fast on inconsistent weight overrides.
methodology = get_methodology()

# ================== APP ==================
app = FastAPI(title=settings.app_name, version=settings.version)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    logger.warning("Rejected ESG input on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": [exc.to_dict()]})


app.include_router(esg.router, prefix="/esg", tags=["ESG Scoring"])
app.include_router(reports.router, prefix="/esg", tags=["ESG Reports"])


# ================== ROUTES ==================
@app.get("/", tags=["Root"])
async def root():
    return {
        "message": settings.app_name,
        "version": settings.version,
        "pillar_weights": {p.value: w for p, w in methodology.pillar_weights.items()},
        "timestamp": datetime.now().isoformat(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

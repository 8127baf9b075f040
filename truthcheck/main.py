from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from truthcheck.config import Settings, check_api_keys_on_startup, get_settings, logger
from truthcheck.exceptions import TruthCheckException
from truthcheck.middleware import RequestContextMiddleware, get_request_id
from truthcheck.models import AnalysisResult, AnalyzeRequest, ErrorResponse
from truthcheck.services import AnalysisClient

app = FastAPI(title="TruthCheck API")


@app.on_event("startup")
async def startup_event():
    check_api_keys_on_startup()


app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TruthCheckException)
async def truthcheck_exception_handler(request: Request, exc: TruthCheckException):
    body: ErrorResponse = exc.to_dict()
    body["details"] = {**body["details"], "request_id": get_request_id()}
    return JSONResponse(status_code=exc.status_code, content=body)


def get_analysis_client(settings: Settings = Depends(get_settings)) -> AnalysisClient:
    return AnalysisClient(settings)


@app.get("/")
async def health_check():
    return {"status": "ok", "message": "TruthCheck API is running."}


@app.post("/analyze", response_model=AnalysisResult, response_model_exclude_none=True)
async def analyze(req: AnalyzeRequest, client: AnalysisClient = Depends(get_analysis_client)):
    """Fact-check a single claim."""
    try:
        return await client.analyze(req.claim)
    except TruthCheckException as e:
        logger.error("Analysis failed: %s", e.message)
        raise

from fastapi import FastAPI, UploadFile, File, HTTPException, Request
from fastapi.responses import JSONResponse

from . import __version__, config
from .errors import ConversionError
from .log import configure_logging
from .models import ConvertResponse, ErrorResponse, HealthResponse, TextConvertRequest
from .service import convert_text, convert_upload

configure_logging(config.LOG_LEVEL)

app = FastAPI(
    title="csv-flattener",
    description="Flatten username/displayName CSV files into copy-pastable text",
    version=__version__,
)

_errors = {
    422: {
        "model": ErrorResponse,
        "description": "Conversion failed (message) or request was invalid (error list)",
    }
}


@app.exception_handler(ConversionError)
async def conversion_error_handler(request: Request, exc: ConversionError):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.get("/")
def index():
    return {"name": app.title, "version": app.version}


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/convert", response_model=ConvertResponse, responses=_errors)
async def convert_csv(file: UploadFile = File(...)):
    raw = await file.read(config.MAX_UPLOAD_BYTES + 1)
    if len(raw) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="CSV file is too large")

    return convert_upload(file.filename or "", raw)


@app.post("/convert/text", response_model=ConvertResponse, responses=_errors)
def convert_pasted(body: TextConvertRequest):
    return convert_text(body.filename or "pasted.csv", body.text)

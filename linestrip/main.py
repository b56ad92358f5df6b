from fastapi import FastAPI, UploadFile, File, Form, HTTPException
from .models import HealthResponse, StripFileResponse, StripRequest, StripResponse
from .rules import TEXT_SUFFIXES
from .strip import strip_text_bytes, strip_with_report

app = FastAPI(
    title="linestrip",
    description="Remove a literal substring from every line of a text",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/strip", response_model=StripResponse)
def strip_text(body: StripRequest):
    text, report = strip_with_report(body.text, body.substring)
    return {"text": text, "report": report}

@app.post("/strip/file", response_model=StripFileResponse)
async def strip_file(file: UploadFile = File(...), substring: str = Form("")):
    if not (file.filename or "").lower().endswith(TEXT_SUFFIXES):
        raise HTTPException(status_code=422, detail="Only plain text files are supported")

    raw = await file.read()
    return strip_text_bytes(raw, substring)

"""FastAPI application for the htmlmock capture cleaner.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import json
import logging
import os
import traceback
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Load .env from the project directory so HTMLMOCK_* settings are set
load_dotenv(Path(__file__).resolve().parent / ".env")

from cleaner import __version__
from cleaner.demo import DEMO_HTML
from cleaner.pipeline import clean_html
from models.options import DEFAULT_OPTIONS
from models.request import CleanRequest, form_values
from models.response import CleanResponse, DemoResponse


# ---------------------------------------------------------------------------
# Structured JSON logging
# ---------------------------------------------------------------------------

class StructuredFormatter(logging.Formatter):
    """JSON-lines formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Include optional extra fields when present
        for key in ("input_length", "output_length", "scope", "pass_name", "count"):
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


_handler = logging.StreamHandler()
_handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("htmlmock")
logger.addHandler(_handler)
logger.setLevel(os.getenv("HTMLMOCK_LOG_LEVEL", "INFO").upper())
# Prevent propagation to root logger to avoid duplicate output
logger.propagate = False


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="htmlmock", version=__version__)


@app.exception_handler(Exception)
async def catch_all_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and answer with a generic 500."""
    logger.error(
        "Unhandled exception: %s: %s\n%s",
        type(exc).__name__,
        exc,
        traceback.format_exc(),
    )
    return JSONResponse(status_code=500, content={"error": "internal error"})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
def health() -> dict:
    """Health check."""
    return {"status": "healthy", "version": __version__}


@app.get("/options")
def options() -> dict:
    """Default options, both typed and as the editor form shows them."""
    return {
        "defaults": DEFAULT_OPTIONS.model_dump(by_alias=True),
        "form": form_values(DEFAULT_OPTIONS),
    }


@app.post("/clean", response_model=CleanResponse)
def clean(request: CleanRequest) -> CleanResponse:
    """Clean a captured HTML fragment.

    Form values are sanitized by ``CleanRequest`` validation, merged over
    the defaults and handed to the cleaning pipeline.
    """
    opts = request.options.to_options()
    scope = "targets" if opts.target_selectors else "document"
    html = clean_html(request.html, opts)

    logger.info(
        "clean request",
        extra={
            "input_length": len(request.html),
            "output_length": len(html),
            "scope": scope,
        },
    )
    return CleanResponse(html=html)


@app.get("/demo", response_model=DemoResponse)
def demo() -> DemoResponse:
    """The editor's sample capture, cleaned with the default options."""
    return DemoResponse(input=DEMO_HTML, output=clean_html(DEMO_HTML))

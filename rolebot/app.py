# ============================================================
# Rolebot FastAPI App
# ------------------------------------------------------------
# Wires the ask pipeline behind a tiny HTTP surface:
#   - POST /ask     query -> clarification | forwarding | answer
#   - GET  /        liveness text
#   - GET  /health  status + index state
# Responses from /ask are always plain strings.
# ============================================================

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

# --- Local imports ---
from rolebot.errors import MissingInput, ProviderError
from rolebot.logging_utils import setup_logging
from rolebot.pipeline import AskPipeline, build_pipeline
from rolebot.settings import settings

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred."


# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class AskRequest(BaseModel):
    query: Any = None


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
def create_app(pipeline: Optional[AskPipeline] = None) -> FastAPI:
    """Build the app around an explicitly owned pipeline (one shared index per app)."""
    app = FastAPI(title="Rolebot API", version="0.1")
    app.state.pipeline = pipeline or build_pipeline(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"], allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    def bad_body(request: Request, exc: RequestValidationError):
        # /ask is the only route with a body; an unreadable one counts as a missing query
        logger.info("Rejected request body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": "Missing query."})

    # --------------------------------------------------------
    # 💬 Main ask route
    # --------------------------------------------------------
    @app.post("/ask")
    def ask(request: Request, req: Optional[AskRequest] = None):
        pipe: AskPipeline = request.app.state.pipeline
        try:
            outcome = pipe.ask(req.query if req else None)
        except MissingInput:
            return JSONResponse(status_code=400, content={"error": "Missing query."})
        except ProviderError:
            logger.exception("Model provider failure while answering query")
            return PlainTextResponse(GENERIC_ERROR, status_code=500)
        except Exception:
            logger.exception("Unexpected failure while answering query")
            return PlainTextResponse(GENERIC_ERROR, status_code=500)
        return PlainTextResponse(outcome.text)

    # --------------------------------------------------------
    # 🧭 Health checks
    # --------------------------------------------------------
    @app.get("/health")
    def health(request: Request):
        index = request.app.state.pipeline.index
        return {
            "status": "ok",
            "env": settings.ENV,
            "index": {"state": index.state.value, "chunks": len(index)},
        }

    @app.get("/", response_class=PlainTextResponse)
    def hello():
        return "AI Agent Server is running!"

    return app


setup_logging(settings.LOG_LEVEL)
app = create_app()

# torqueup/main.py
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from torqueup import config
from torqueup.router import answer_turn
from torqueup.schemas import ChatRequest, ChatResponse, ErrorResponse

if not logging.getLogger().handlers:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
logger = logging.getLogger("torqueup.api")

CORS_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

app = FastAPI(title="TorqueUp Assistant API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=CORS_HEADERS,
)


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError):
    # Malformed payloads answer like any other failed turn
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.warning("Invalid request to %s: %s", request.url.path, details)
    return _error(f"Invalid request body: {details}")


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.options("/gemini-chat")
async def gemini_chat_preflight():
    return Response(status_code=200)


@app.post("/gemini-chat", response_model=ChatResponse, responses={500: {"model": ErrorResponse}})
async def gemini_chat(req: ChatRequest):
    previous = req.context.previousMessages if req.context else []
    # The assistant only ever sees the most recent turns
    if config.MAX_CONTEXT_TURNS > 0:
        previous = previous[-config.MAX_CONTEXT_TURNS:]

    try:
        return await answer_turn(req.message, req.cars, [t.model_dump() for t in previous])
    except Exception as e:
        logger.exception("Error in gemini-chat: %s", e)
        return _error(str(e))

"""HTTP 入口：POST /api/ai/chat。"""

import json
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chat_gateway.api.service import ChatGateway
from chat_gateway.config.settings import settings as default_settings
from chat_gateway.domain.exceptions import MalformedRequestError


def create_app(gateway: Optional[ChatGateway] = None, settings=default_settings) -> FastAPI:
    gateway = gateway or ChatGateway(settings)

    app = FastAPI(
        title="Chat Gateway",
        description="Task assistant LLM gateway",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _respond(result) -> JSONResponse:
        return JSONResponse(
            status_code=result.http_status,
            content=result.to_body(debug=settings.expose_debug, environment=settings.app_env),
        )

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    @app.post("/api/ai/chat")
    async def chat(request: Request):
        raw = await request.body()
        try:
            payload = json.loads(raw or b"null")
        except (ValueError, RecursionError):
            error = MalformedRequestError(
                code="MALFORMED_REQUEST",
                message="Request body is not valid JSON",
            )
            return _respond(gateway.failure(error))
        # Provider 调用是同步 httpx，放到线程池里执行
        result = await run_in_threadpool(gateway.handle_payload, payload)
        return _respond(result)

    return app


app = create_app()

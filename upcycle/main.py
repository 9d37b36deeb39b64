from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import time

from upcycle.routers import ideas, materials, metrics, search
from upcycle.utils import logging as _log_sinks  # noqa: F401  (installs the loguru file sink)
from upcycle.utils import slog
from upcycle.utils.metrics import record_endpoint

app = FastAPI(
    title="Upcycle Ideas",
    description="Recycling tips lookup and rule-based upcycling idea generation.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


def _router_context(request: Request) -> dict:
    # routers may stash qhash / source / cache_hit here
    return dict(getattr(request.state, "log_context", None) or {})


@app.middleware("http")
async def _request_log_middleware(request: Request, call_next):
    start = time.perf_counter()
    req_id = slog.new_request_id()
    path = request.url.path
    client_ip = request.client.host if request.client else None

    def _elapsed_ms() -> int:
        return int((time.perf_counter() - start) * 1000)

    try:
        response = await call_next(request)
    except Exception as e:
        slog.log_event(
            "request.error",
            request_id=req_id,
            method=request.method,
            path=path,
            latency_ms=_elapsed_ms(),
            client_ip=client_ip,
            error=repr(e),
            **_router_context(request),
        )
        raise

    latency_ms = _elapsed_ms()
    ctx = _router_context(request)
    ctx.setdefault("rate_limited", response.status_code == 429)
    slog.finalize_request_log(
        request_id=req_id,
        method=request.method,
        path=path,
        status=response.status_code,
        latency_ms=latency_ms,
        client_ip=client_ip,
        ctx=ctx,
    )
    record_endpoint(method=request.method, path=path, latency_ms=latency_ms)
    response.headers["X-Request-ID"] = req_id
    return response


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(search.router)
app.include_router(ideas.router)
app.include_router(materials.router)
app.include_router(metrics.router)

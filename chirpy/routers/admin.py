from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

router = APIRouter(tags=["admin"])

METRICS_PAGE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


@router.get("/api/healthz", response_class=PlainTextResponse)
def healthz():
    return "OK"


@router.get("/admin/metrics", response_class=HTMLResponse)
def metrics(request: Request):
    return METRICS_PAGE.format(hits=request.app.state.hit_counter.hits)


@router.post("/api/reset", response_class=PlainTextResponse)
def reset(request: Request):
    request.app.state.hit_counter.reset()
    return "Reset api hit count"

# pieviz/server/pie_routes.py
from __future__ import annotations
import logging
import os

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse, Response

from pieviz.data.dataset import Dataset
from pieviz.server.logging_utils import log_render_run
from pieviz.svl.pie_spec import PieSpec
from pieviz.svl.pie_verify import verify_pie
from pieviz.ve.pie_chart import PieChart
from pieviz.ve.svg_adapter import svg_document

log = logging.getLogger(__name__)

router = APIRouter(prefix="/pie", tags=["pie"])


def _render_log() -> str:
    return os.environ.get("PIEVIZ_RENDER_LOG", "")


def _default_palette() -> str:
    return os.environ.get("PIEVIZ_DEFAULT_PALETTE", "default")


def _bad_request(errors, n=0, decision="rejected"):
    log.info("pie request rejected: %s", errors)
    log_render_run(_render_log(), n, None, decision)
    return JSONResponse({"ok": False, "errors": errors}, status_code=400)


def _chart_from_spec(spec: PieSpec) -> PieChart:
    dataset = Dataset(spec.rows(), ["category", "value"])
    return PieChart.new(
        dataset,
        mapping={"category_col": "category", "value_col": "value"},
        width=spec.width,
        height=spec.height,
        colour_palette=spec.colour_palette or _default_palette(),
        data_labels=spec.data_labels,
    )


def _parse(payload: dict):
    """Returns (spec, chart) or (None, error response)."""
    try:
        spec = verify_pie(payload)
    except ValueError as e:  # pydantic.ValidationError is a ValueError
        errs = e.errors(include_url=False, include_context=False) if hasattr(e, "errors") else [str(e)]
        return None, _bad_request([err["msg"] if isinstance(err, dict) else err for err in errs])
    try:
        return spec, _chart_from_spec(spec)
    except ValueError as e:
        return None, _bad_request([str(e)], n=len(spec.labels))


@router.post("/svg")
def pie_svg(payload: dict = Body(...)):
    spec, chart = _parse(payload)
    if spec is None:
        return chart
    try:
        fragment = chart.to_svg()
    except ValueError as e:
        return _bad_request([str(e)], n=len(spec.labels), decision="render_error")
    log_render_run(_render_log(), len(spec.labels), sum(spec.values), "rendered")
    body = svg_document(fragment, spec.width, spec.height, spec.title, spec.alt_text) if spec.standalone else fragment
    return Response(content=body, media_type="image/svg+xml")


@router.post("/layout")
def pie_layout(payload: dict = Body(...)):
    spec, chart = _parse(payload)
    if spec is None:
        return chart
    try:
        placements = chart.layout()
    except ValueError as e:
        return _bad_request([str(e)], n=len(spec.labels), decision="render_error")
    log_render_run(_render_log(), len(spec.labels), sum(spec.values), "laid_out")
    return {"ok": True, "title": spec.title, "slices": [p.to_dict() for p in placements]}

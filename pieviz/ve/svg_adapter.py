# pieviz/ve/svg_adapter.py
import html
from typing import List, Sequence

from .slice_layout import LabelDescriptor, SegmentDescriptor, SlicePlacement

SMALL_LABEL_CLASS = "pieviz-label-small"
_SVG_NS = "http://www.w3.org/2000/svg"


def segment_svg(seg: SegmentDescriptor) -> str:
    r = seg.radius
    return (
        f'<circle r="{r / 2}" cx="{r}" cy="{r}" fill="transparent" '
        f'stroke="#{seg.colour}" stroke-width="{r}" '
        f'stroke-dasharray="{seg.dash_length} {seg.circumference}" '
        f'stroke-dashoffset="-{abs(seg.dash_offset)}"></circle>'
    )


def label_svg(label: LabelDescriptor, r: float) -> str:
    tx, ty = label.translate
    transform = f"rotate({label.rotation},{r},{r}) translate({tx}, {ty})"
    if label.flipped:
        transform += " scale(-1,-1)"
    css = SMALL_LABEL_CLASS if label.small else ""
    return (
        f'<text x="{label.x}" y="{label.y}" text-anchor="middle" '
        f'fill="transparent" color="white" class="{css}" stroke-width="1" '
        f'transform="{transform}">{html.escape(label.text)}</text>'
    )


def slices_svg(placements: Sequence[SlicePlacement]) -> str:
    """Later slices are drawn over earlier ones, so output order is input order."""
    parts: List[str] = ["<g>"]
    for p in placements:
        parts.append(segment_svg(p.segment))
        if p.label is not None:
            parts.append(label_svg(p.label, p.segment.radius))
    parts.append("</g>")
    return "\n".join(parts)


def svg_document(fragment: str, width: float, height: float,
                 title: str = "Pie Chart", alt_text: str = "") -> str:
    w, h = float(width), float(height)
    return (
        f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {w:g} {h:g}" width="{w:g}" height="{h:g}" role="img">\n'
        f"<title>{html.escape(title)}</title>\n"
        f"<desc>{html.escape(alt_text)}</desc>\n"
        f"{fragment}\n"
        "</svg>"
    )

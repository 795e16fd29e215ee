"""
Canvas debug: 1) HTML table of generated nodes and coordinates; 2) PNG overview of the grid.
"""
from __future__ import annotations

import html
from pathlib import Path, PurePosixPath

from .canvas_schema import CanvasDocument


def _esc(s: str) -> str:
    return html.escape(str(s))


def write_canvas_preview_html(canvas: CanvasDocument, out_path: Path) -> Path:
    """
    Write <name>_preview.html: one table row per node (file, subpath, x, y, width, height, id).
    """
    out_path = Path(out_path)
    parts = []
    parts.append("""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8"/>
<meta name="viewport" content="width=device-width, initial-scale=1"/>
<title>Canvas nodes and coordinates</title>
<style>
  body { font-family: sans-serif; margin: 1rem; background: #fafafa; }
  h1 { font-size: 1.2rem; }
  table { border-collapse: collapse; width: 100%; max-width: 1100px; background: #fff; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
  th, td { border: 1px solid #ddd; padding: 0.4rem 0.6rem; text-align: left; }
  th { background: #333; color: #fff; }
  tr:nth-child(even) { background: #f9f9f9; }
  .num { font-variant-numeric: tabular-nums; }
  code { background: #eee; padding: 0.1em 0.3em; border-radius: 3px; }
</style>
</head>
<body>
<h1>Canvas nodes and coordinates</h1>
""")
    parts.append(
        f'<p>{len(canvas.nodes)} node(s), {len(canvas.edges)} edge(s). '
        'Per-node <code>file</code>, <code>subpath</code> and rectangle for debugging.</p>\n'
    )
    parts.append("""<table>
<thead><tr><th>#</th><th>file</th><th>subpath</th><th>x</th><th>y</th><th>width</th><th>height</th><th>id</th></tr></thead>
<tbody>
""")
    for i, node in enumerate(canvas.nodes):
        parts.append(
            f'<tr><td class="num">{i}</td><td>{_esc(node.file)}</td><td>{_esc(node.subpath or "")}</td>'
            f'<td class="num">{node.x}</td><td class="num">{node.y}</td>'
            f'<td class="num">{node.width}</td><td class="num">{node.height}</td>'
            f'<td><code>{_esc(node.id)}</code></td></tr>\n'
        )
    parts.append("</tbody></table>\n")
    parts.append("</body></html>")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("".join(parts), encoding="utf-8")
    return out_path


def render_canvas_overview(
    canvas: CanvasDocument,
    out_path: Path,
    *,
    scale: float = 0.25,
    margin: int = 10,
) -> Path:
    """
    Draw every node as a scaled rectangle labelled with file stem and subpath; save as PNG.
    Negative coordinates are shifted so the whole grid is visible.
    """
    from PIL import Image, ImageDraw, ImageFont

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if not canvas.nodes:
        img = Image.new("RGB", (200, 60), (255, 255, 255))
        ImageDraw.Draw(img).text((margin, margin), "(empty canvas)", fill=(0, 0, 0))
        img.save(out_path, "PNG")
        return out_path

    rects = []
    for node in canvas.nodes:
        x0, x1 = sorted((node.x, node.x + node.width))
        y0, y1 = sorted((node.y, node.y + node.height))
        rects.append((x0, y0, x1, y1))
    min_x = min(r[0] for r in rects)
    min_y = min(r[1] for r in rects)
    max_x = max(r[2] for r in rects)
    max_y = max(r[3] for r in rects)

    w = max(1, int((max_x - min_x) * scale)) + 2 * margin
    h = max(1, int((max_y - min_y) * scale)) + 2 * margin
    img = Image.new("RGB", (w, h), (255, 255, 255))
    draw = ImageDraw.Draw(img)

    try:
        font = ImageFont.load_default()
    except Exception:
        font = None

    for node, (x0, y0, x1, y1) in zip(canvas.nodes, rects):
        left = int((x0 - min_x) * scale) + margin
        top = int((y0 - min_y) * scale) + margin
        right = int((x1 - min_x) * scale) + margin
        bottom = int((y1 - min_y) * scale) + margin
        draw.rectangle((left, top, right, bottom), outline=(51, 51, 51), fill=(245, 245, 245))
        label = PurePosixPath(node.file).stem
        if node.subpath:
            label = f"{label} {node.subpath}"
        if font:
            draw.text((left + 3, top + 3), label, fill=(0, 0, 0), font=font)
        else:
            draw.text((left + 3, top + 3), label, fill=(0, 0, 0))

    img.save(out_path, "PNG")
    return out_path

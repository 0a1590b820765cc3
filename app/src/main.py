"""FastAPI web app for spinner export and preview."""

from typing import Any

from dotenv import load_dotenv
from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.responses import Response

from spinforge.config import config_from_dict
from spinforge.constants import PREVIEW_QUALITY
from spinforge.export_pipeline import export_spinner, preview_spinner
from spinforge.output import (
    export_format_label,
    media_type_for_export_format,
    supported_export_formats,
)

load_dotenv()

app = FastAPI(title="Spinforge")


@app.get("/api/formats")
async def formats():
    """List the supported export formats."""
    return [
        {
            "format": name,
            "label": export_format_label(name),
            "mediaType": media_type_for_export_format(name),
        }
        for name in supported_export_formats()
    ]


@app.post("/api/export")
async def export(
    config: dict[str, Any] = Body(...),
    export_format: str = Query("svg", alias="format", description="Export format: svg, css, or gsap"),
    seed: int | None = Query(None, description="Seed for random shape and radius draws"),
):
    """Export a spinner configuration as code."""
    try:
        spinner_config = config_from_dict(config)
        artifact = export_spinner(spinner_config, export_format, seed=seed)
        return artifact.as_dict()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to export spinner: {e}")


@app.post("/api/preview")
async def preview(
    config: dict[str, Any] = Body(...),
    quality: str = Query("medium", description="Preview quality: low, medium, or high"),
    background: str | None = Query(None, description="Background color; transparent when omitted"),
    seed: int | None = Query(None, description="Seed for random shape and radius draws"),
):
    """Render the first frame of a spinner as a PNG image."""
    size = PREVIEW_QUALITY.get(quality.lower())
    if size is None:
        raise HTTPException(status_code=400, detail=f"Unknown quality: {quality}")

    try:
        spinner_config = config_from_dict(config)
        encoded = preview_spinner(spinner_config, size=size, background=background, seed=seed)
        return Response(
            content=encoded,
            media_type="image/png",
            headers={"Content-Disposition": "inline; filename=spinner.png"},
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to render preview: {e}")

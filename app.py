"""FastAPI front end: upload a resume, get back the HTML analysis report."""
from __future__ import annotations

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

import uvicorn
from fastapi import FastAPI, File, Form, UploadFile
from fastapi.responses import HTMLResponse

from resume_insight.config import UPLOAD_DIR, Settings, load_settings
from resume_insight.errors import InvalidInputError, UploadTooLargeError, UpstreamError
from resume_insight.extractor import resolve_resume_text
from resume_insight.log import get_logger
from resume_insight.pipeline import ResumeInsightPipeline, build_pipeline
from resume_insight.report import render_error, render_form, render_report

log = get_logger(__name__)

_CHUNK = 64 * 1024


@contextmanager
def stored_upload(
    stream: BinaryIO,
    filename: str,
    max_bytes: int,
    upload_dir: Path | None = None,
) -> Iterator[Path | None]:
    """Copy an upload to a temporary file and delete it on exit.

    Yields None when the upload is empty.
    """
    upload_dir = upload_dir or UPLOAD_DIR
    upload_dir.mkdir(parents=True, exist_ok=True)
    suffix = Path(filename).suffix.lower()
    tmp = tempfile.NamedTemporaryFile(dir=upload_dir, suffix=suffix, delete=False)
    path = Path(tmp.name)
    try:
        written = 0
        with tmp:
            while chunk := stream.read(_CHUNK):
                written += len(chunk)
                if written > max_bytes:
                    raise UploadTooLargeError(
                        f"{filename} is larger than {max_bytes // 1024} KiB"
                    )
                tmp.write(chunk)
        log.debug("Stored upload %s (%d bytes) at %s", filename, written, path)
        yield path if written else None
    finally:
        path.unlink(missing_ok=True)


def create_app(
    settings: Settings | None = None,
    pipeline: ResumeInsightPipeline | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    pipeline = pipeline or build_pipeline(settings)

    app = FastAPI(title="Resume Insight", version="1.0.0")
    app.state.settings = settings
    app.state.pipeline = pipeline

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        return HTMLResponse(content=render_form())

    @app.get("/health")
    def health() -> dict:
        return {
            "status": "healthy",
            "completion_configured": settings.completion_configured,
            "job_search_configured": bool(settings.rapid_api_key),
        }

    @app.post("/analyze", response_class=HTMLResponse)
    def analyze(
        cvfile: UploadFile | None = File(None),
        text: str | None = Form(None),
    ) -> HTMLResponse:
        try:
            if cvfile is not None and cvfile.filename:
                with stored_upload(cvfile.file, cvfile.filename, settings.max_upload_bytes) as path:
                    resume_text = resolve_resume_text(path, cvfile.filename, text)
            else:
                resume_text = resolve_resume_text(text=text)

            insight = pipeline.run(resume_text)
            return HTMLResponse(content=render_report(insight))
        except InvalidInputError as exc:
            log.warning("Rejected request: %s", exc)
            return HTMLResponse(content=render_error(str(exc)), status_code=400)
        except UpstreamError as exc:
            log.exception("Analysis failed upstream")
            return HTMLResponse(content=render_error(str(exc)), status_code=502)
        except Exception as exc:
            log.exception("Analysis failed")
            return HTMLResponse(content=render_error(str(exc)), status_code=500)

    return app


app = create_app()


if __name__ == "__main__":
    port = app.state.settings.port
    log.info("Server running on http://localhost:%d", port)
    uvicorn.run(app, host="0.0.0.0", port=port, log_config=None)

"""
Extraction routes: document snapshots, forced extraction and the pull query.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from ..config import state, get_publisher
from ..exceptions import require_engine
from ..publisher import ResultPublisher
from ..schemas import (
    DocumentSnapshotRequest,
    DocumentSnapshotResponse,
    VideoInfoQueryResponse,
    VideoInfoResponse,
)

router = APIRouter(tags=["video"])


# ─────────────────────────────────────────────────────────────
# Document Snapshots
# ─────────────────────────────────────────────────────────────

@router.post("/document")
async def push_document(request: DocumentSnapshotRequest) -> DocumentSnapshotResponse:
    """
    Load a rendered page into the document.

    The first snapshot is extracted right away. After that, a snapshot at a
    new address schedules a re-extraction once the settle delay has passed,
    and a snapshot at the same address just refreshes the content.
    """
    engine = require_engine(state.engine)

    if not engine.watcher.running:
        change = engine.document.update(request.html, request.url)
        engine.start()
        return DocumentSnapshotResponse(
            url=change.url,
            address_changed=change.address_changed,
            extracted=True,
            rerun_scheduled=False,
        )

    change = engine.document.update(request.html, request.url)
    return DocumentSnapshotResponse(
        url=change.url,
        address_changed=change.address_changed,
        extracted=False,
        rerun_scheduled=engine.watcher.pending,
    )


@router.post("/extract")
async def extract_now() -> VideoInfoResponse:
    """Re-extract the current document immediately."""
    engine = require_engine(state.engine)
    engine.watcher.cancel()
    return VideoInfoResponse.from_model(engine.run())


# ─────────────────────────────────────────────────────────────
# Pull Query
# ─────────────────────────────────────────────────────────────

@router.get("/video-info")
async def get_video_info(
    publisher: Annotated[ResultPublisher, Depends(get_publisher)]
) -> VideoInfoQueryResponse:
    """Latest extraction result, never waiting for a run."""
    info = publisher.latest
    if info is None:
        return VideoInfoQueryResponse(status="none")
    return VideoInfoQueryResponse(status="ready", video_info=VideoInfoResponse.from_model(info))

"""Tool handler for record_labels.

Returns a hand-curated list of British folk labels with discography pages on
the site. No fetch is involved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from folkcontext.models.records import RecordLabel

if TYPE_CHECKING:
    from folkcontext.state import AppState

RECORD_LABELS: tuple[RecordLabel, ...] = (
    RecordLabel(
        name="Topic Records (Vinyl)",
        description="The legendary folk label, vinyl era",
        path="/folk/records/topic.html",
    ),
    RecordLabel(
        name="Topic Records (CD)",
        description="Topic's CD reissues and new releases",
        path="/folk/records/topiccd.html",
    ),
    RecordLabel(
        name="Fellside",
        description="Major folk and acoustic label",
        path="/folk/records/fellside.html",
    ),
    RecordLabel(
        name="Fledg'ling",
        description="Quality folk reissues",
        path="/folk/records/fledgling.html",
    ),
    RecordLabel(
        name="Greentrax",
        description="Scottish folk and tradition",
        path="/folk/records/greentrax.html",
    ),
    RecordLabel(
        name="Leader/Trailer",
        description="Bill Leader's influential labels",
        path="/folk/records/leadertrailer.html",
    ),
    RecordLabel(
        name="Free Reed",
        description="Specialist folk reissues",
        path="/folk/records/freereed.html",
    ),
    RecordLabel(
        name="Veteran",
        description="Field recordings and tradition bearers",
        path="/folk/records/veteran.html",
    ),
    RecordLabel(
        name="Wild Goose",
        description="Contemporary folk",
        path="/folk/records/wildgoose.html",
    ),
    RecordLabel(
        name="Musical Traditions",
        description="Traditional singers",
        path="/folk/records/musicaltraditions.html",
    ),
    RecordLabel(
        name="Hudson",
        description="Folk compilations",
        path="/folk/records/hudson.html",
    ),
)


async def handle(state: AppState) -> str:
    """Handle a record_labels tool call."""
    log = structlog.get_logger().bind(tool="record_labels")
    log.info("handler_called", label_count=len(RECORD_LABELS))
    return "\n\n".join(
        f"**{label.name}**\n{label.description}\n→ {label.path}" for label in RECORD_LABELS
    )

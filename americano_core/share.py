"""Hand-off of the summary text to a share target or clipboard."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Protocol

logger = logging.getLogger(__name__)


ShareMethod = Literal["share", "clipboard", "none"]

SHARED_MESSAGE = "Shared successfully."
COPIED_MESSAGE = "Summary copied to clipboard."
FAILED_MESSAGE = "Unable to share or copy. Please copy manually."


class ShareTarget(Protocol):
    def share(self, title: str, text: str) -> None:
        ...


class Clipboard(Protocol):
    def write_text(self, text: str) -> None:
        ...


@dataclass(frozen=True)
class ShareOutcome:
    ok: bool
    method: ShareMethod
    message: str


def share_summary(
    title: str,
    text: str,
    *,
    share_target: ShareTarget | None = None,
    clipboard: Clipboard | None = None,
) -> ShareOutcome:
    """Share via the native target when available, else copy to the clipboard.

    Collaborator failures never propagate; they become the advisory message.
    """
    try:
        if share_target is not None:
            share_target.share(title, text)
            return ShareOutcome(ok=True, method="share", message=SHARED_MESSAGE)
        if clipboard is not None:
            clipboard.write_text(text)
            return ShareOutcome(ok=True, method="clipboard", message=COPIED_MESSAGE)
    except Exception as e:
        logger.warning(f"Share failed: {e}")
        return ShareOutcome(ok=False, method="none", message=FAILED_MESSAGE)
    logger.info("No share target or clipboard available")
    return ShareOutcome(ok=False, method="none", message=FAILED_MESSAGE)

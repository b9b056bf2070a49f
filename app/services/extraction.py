"""Extract a subsidy amount for (region, trim) from raw page text.

Matching runs as an ordered list of strategies. Each strategy contributes
candidate labels and a provenance tag; the first label whose window yields
a won amount wins, so an exact trim label is never overridden by a model-level
fallback found later in the page.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence

from app.services.context_locator import locate_label, locate_window
from app.services.extraction_result import ExtractionResult, Found, NotFound, NotFoundReason
from app.services.money_parser import parse_won
from app.services.text import normalize
from app.services.trim_aliases import aliases_for, fallback_aliases_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatcherStrategy:
    tag: str
    labels_for: Callable[[str], List[str]]


DEFAULT_STRATEGIES: Sequence[MatcherStrategy] = (
    MatcherStrategy(tag="alias", labels_for=aliases_for),
    MatcherStrategy(tag="fallback", labels_for=fallback_aliases_for),
)


def extract(
        page_text: str,
        region: str,
        trim: str,
        strategies: Sequence[MatcherStrategy] = DEFAULT_STRATEGIES,
) -> ExtractionResult:
    region_window = locate_window(page_text, normalize(region))
    if isinstance(region_window, NotFound):
        return region_window

    any_labels = False
    for strategy in strategies:
        labels = strategy.labels_for(trim)
        any_labels = any_labels or bool(labels)
        for label in labels:
            label_window = locate_label(region_window, label)
            if isinstance(label_window, NotFound):
                continue
            won = parse_won(label_window)
            if won is not None:
                return Found(amount_won=won, matched_alias=f"{strategy.tag}:{label}")
            logger.debug("Label %r found for %s/%s but no amount nearby", label, region, trim)

    if not any_labels:
        return NotFound(NotFoundReason.UNKNOWN_TRIM)
    return NotFound(NotFoundReason.TRIM_OR_MONEY_NOT_FOUND)

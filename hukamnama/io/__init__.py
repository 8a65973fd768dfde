"""I/O boundaries: page acquisition, field extraction, and artifact storage."""

from .page_extractor import HukamnamaPageExtractor, PageExtractionError
from .page_fetcher import (
    BrowserPageFetcher,
    FetchError,
    HttpPageFetcher,
    PageFetcher,
    create_page_fetcher,
)
from .storage import ArtifactStore

__all__ = [
    "ArtifactStore",
    "BrowserPageFetcher",
    "FetchError",
    "HttpPageFetcher",
    "HukamnamaPageExtractor",
    "PageExtractionError",
    "PageFetcher",
    "create_page_fetcher",
]

"""Inverted keyword index over video titles."""

import bisect
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from loguru import logger

from playlist_manager.catalog.text_processing import keyword_set, remove_symbols_and_case
from playlist_manager.models.video import Video


@dataclass
class SearchResult:
    """
    Outcome of a title search.

    Attributes:
        keywords: Distinct index tokens the query keywords resolved to.
        videos: Matching videos, literal title matches first.
    """

    keywords: List[str] = field(default_factory=list)
    videos: List[Video] = field(default_factory=list)

    def __iter__(self):
        """Allow ``keywords, videos = index.search(query)``."""
        return iter((self.keywords, self.videos))


class SearchIndex:
    """
    Keyword to video index with nearest-token lookup.

    Each bucket is keyed by video identity, so indexing a video again
    replaces it instead of duplicating it. The sorted token list always
    mirrors the bucket keys and backs the binary search in nearest_token.
    """

    def __init__(self) -> None:
        """Initialize an empty index."""
        self._buckets: Dict[str, Dict[int, Video]] = {}
        self._sorted_tokens: List[str] = []
        self._lock = threading.RLock()

    @property
    def sorted_tokens(self) -> List[str]:
        """Sorted, deduplicated list of every indexed keyword."""
        return list(self._sorted_tokens)

    @property
    def is_built(self) -> bool:
        """True once at least one keyword was indexed."""
        return bool(self._sorted_tokens)

    def bucket(self, token: str) -> List[Video]:
        """Return the videos indexed under an exact token."""
        with self._lock:
            return list(self._buckets.get(token, {}).values())

    def build_index(self, videos: Iterable[Video]) -> None:
        """
        Add videos to the index.

        Existing buckets are kept and extended, then the sorted token list
        is recomputed from the bucket keys.

        Args:
            videos: Videos to index.
        """
        count = 0
        with self._lock:
            for video in videos:
                for keyword in keyword_set(video.title):
                    self._buckets.setdefault(keyword, {})[video.id] = video
                count += 1
            self._sorted_tokens = sorted(self._buckets)
        logger.info(f"Search index updated with {count} videos ({len(self._sorted_tokens)} keywords)")

    def nearest_token(self, keyword: str) -> Optional[str]:
        """
        Find the smallest indexed token greater than or equal to ``keyword``.

        Examples:
            With tokens {"cat", "catalog", "dog"}, "cata" resolves to
            "catalog" and "zzz" resolves to None.
        """
        with self._lock:
            position = bisect.bisect_left(self._sorted_tokens, keyword)
            if position == len(self._sorted_tokens):
                return None
            return self._sorted_tokens[position]

    def search(self, query: str) -> SearchResult:
        """
        Search video titles.

        Every query keyword is resolved to its nearest indexed token, the
        matching buckets are intersected, and videos whose normalized title
        contains the whole normalized query are ranked first.

        Args:
            query: Raw query text.

        Returns:
            SearchResult with the matched keywords and the ranked videos.
        """
        if not query:
            return SearchResult()

        keywords = keyword_set(query)
        if not keywords:
            return SearchResult()

        matched_tokens: List[str] = []
        matched_buckets: List[Dict[int, Video]] = []
        with self._lock:
            # sorted() keeps the reported keywords stable across runs
            for keyword in sorted(keywords):
                token = self.nearest_token(keyword)
                if token is None or token in matched_tokens:
                    continue
                matched_tokens.append(token)
                matched_buckets.append(dict(self._buckets[token]))

        if not matched_buckets:
            logger.debug(f"No keyword match for query {query!r}")
            return SearchResult()

        first, *others = matched_buckets
        matching = [video for identity, video in first.items()
                    if all(identity in bucket for bucket in others)]

        normalized_query = remove_symbols_and_case(query)
        literal = [v for v in matching if normalized_query in remove_symbols_and_case(v.title)]
        approximate = [v for v in matching if normalized_query not in remove_symbols_and_case(v.title)]

        logger.debug(f"Query {query!r} matched {matched_tokens}: {len(matching)} videos")
        return SearchResult(keywords=matched_tokens, videos=literal + approximate)

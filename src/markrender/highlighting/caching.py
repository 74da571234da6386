#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/highlighting/caching.py
"""Memoizing wrapper around another highlighter."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Optional

from markrender.constants import DEFAULT_HIGHLIGHT_CACHE_SIZE
from markrender.highlighting.base import SyntaxHighlighter, Token


class CachingHighlighter(SyntaxHighlighter):
    """Cache token lists by ``(language, code)`` with a bounded LRU.

    Tokenizing is a pure function of its inputs, so cached results are
    interchangeable with fresh ones. The wrapper is safe to share between
    threads.

    Parameters
    ----------
    inner : SyntaxHighlighter
        Highlighter that does the actual work
    maxsize : int, default = 256
        Maximum number of cached entries

    """

    def __init__(self, inner: SyntaxHighlighter, maxsize: int = DEFAULT_HIGHLIGHT_CACHE_SIZE):
        if maxsize <= 0:
            raise ValueError(f"maxsize must be positive, got {maxsize}")
        self.inner = inner
        self.maxsize = maxsize
        self._cache: OrderedDict[tuple[Optional[str], str], tuple[Token, ...]] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def tokenize(self, code: str, language: Optional[str]) -> list[Token]:
        key = (language, code)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._cache.move_to_end(key)
                self.hits += 1
                return list(cached)
            self.misses += 1

        tokens = tuple(self.inner.tokenize(code, language))

        with self._lock:
            self._cache[key] = tokens
            self._cache.move_to_end(key)
            while len(self._cache) > self.maxsize:
                self._cache.popitem(last=False)
        return list(tokens)

    def supports_language(self, language: Optional[str]) -> bool:
        return self.inner.supports_language(language)

    @property
    def supported_languages(self) -> list[str]:
        return self.inner.supported_languages

    def clear(self) -> None:
        """Drop every cached entry and reset the hit counters."""
        with self._lock:
            self._cache.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

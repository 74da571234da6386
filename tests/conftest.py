"""Pytest configuration and shared fixtures for the markrender test suite.

This module provides shared fixtures, test configuration, and Hypothesis
profiles that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from markrender.highlighting import CachingHighlighter, PygmentsHighlighter

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def pygments_highlighter() -> PygmentsHighlighter:
    """Provide the Pygments-backed highlighter."""
    return PygmentsHighlighter()


@pytest.fixture
def caching_highlighter(pygments_highlighter: PygmentsHighlighter) -> CachingHighlighter:
    """Provide a caching wrapper around the Pygments highlighter."""
    return CachingHighlighter(pygments_highlighter, maxsize=8)


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample Markdown exercising most node kinds.

    Returns
    -------
    str
        Standard sample text used across multiple tests.

    """
    return """# Sample Document

This is a **sample document** with *italic text* and some `inline code`.

## Section 2

Here is a list:

- Item 1
- Item 2
- Item 3

And a numbered list:

1. First item
2. Second item

> A quoted line.

```python
def hello_world():
    print("Hello, World!")
```

| Header 1 | Header 2 |
|----------|:--------:|
| Row 1    | Data 1   |

---

A [link](https://example.com "Example") and a footnote[^note].

[^note]: The footnote text.
"""

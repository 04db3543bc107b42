import os
from datetime import datetime, timezone

import pytest

from libconfidence.types import (
    LibraryContext,
    LibraryMetadata,
    Modalities,
    ModelMetadata,
    VersionMetadata,
)

CUTOFF = datetime(2024, 6, 1, tzinfo=timezone.utc)
AS_OF = datetime(2025, 6, 15, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep LIBCONFIDENCE_* from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("LIBCONFIDENCE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def stable_library():
    return LibraryMetadata(
        name="lodash",
        language="JavaScript",
        age_in_years=10,
        release_count=50,  # 5/year
        keywords=frozenset({"utility", "modules"}),
        stars=50_000,
        dependents_count=100_000,
    )


@pytest.fixture
def volatile_library():
    return LibraryMetadata(
        name="new-framework",
        language="Haskell",
        age_in_years=1,
        release_count=100,  # 100/year
        keywords=frozenset({"framework", "platform", "ecosystem", "enterprise"}),
        stars=100,
        dependents_count=10,
    )


@pytest.fixture
def old_version():
    return VersionMetadata(version="4.0.0", release_date=datetime(2023, 1, 1, tzinfo=timezone.utc))


@pytest.fixture
def new_version():
    return VersionMetadata(version="5.0.0", release_date=datetime(2025, 1, 1, tzinfo=timezone.utc))


@pytest.fixture
def model():
    return ModelMetadata(id="test/llm", name="Test LLM", cutoff_date=CUTOFF)


@pytest.fixture
def full_model():
    return ModelMetadata(
        id="test/full",
        name="Full",
        cutoff_date=CUTOFF,
        reasoning=True,
        tool_call=True,
        structured_output=True,
        attachment=True,
        modalities=Modalities(input=frozenset({"text", "image"}), output=frozenset({"text", "image"})),
        context_limit=1_000_000,
        output_limit=100_000,
        knowledge_cutoff=AS_OF,
        last_updated=AS_OF,
        open_weights=True,
        api_compatibility="@ai-sdk/openai-compatible",
    )


@pytest.fixture
def minimal_model():
    return ModelMetadata(
        id="test/minimal",
        name="Minimal",
        cutoff_date=CUTOFF,
        context_limit=4_096,
        output_limit=1_024,
        knowledge_cutoff=datetime(2020, 1, 1, tzinfo=timezone.utc),
        last_updated=datetime(2020, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_library_context(stable_library, model):
    """Build a LibraryContext with overrides for library fields and release date."""

    def _make(release_date=CUTOFF, **library_overrides):
        library = stable_library.model_copy(update=library_overrides)
        version = VersionMetadata(version="1.0.0", release_date=release_date)
        return LibraryContext(library=library, version=version, model=model)

    return _make


@pytest.fixture
def sample_request_yaml(tmp_path):
    """Write a minimal score request and return its path."""
    content = """
library:
  name: lodash
  language: JavaScript
  keywords: [utility, modules]
  stars: 50000
  dependents_count: 100000
versions:
  - version: "4.0.0"
    release_date: "2023-01-01"
  - version: "5.0.0"
    release_date: "2025-01-01"
model:
  id: test/full
  name: Full
  knowledge_cutoff: "2024-06"
  reasoning: true
  tool_call: true
  context_limit: 200000
  output_limit: 64000
"""
    path = tmp_path / "request.yaml"
    path.write_text(content)
    return path

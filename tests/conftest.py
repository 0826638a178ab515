"""Shared fixtures for MediBridge tests."""

import pytest

from medibridge.core.config import Settings
from medibridge.services.translation import Glossary

from tests.helpers import LIBRE_URL, MYMEMORY_URL


@pytest.fixture
def glossary():
    """The two-term glossary used in the headache/fever scenarios."""
    return Glossary.from_mapping({"headache": "cefalea", "fever": "fiebre"})


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and from any real provider."""
    return Settings(
        _env_file=None,
        huggingface_api_token=None,
        libretranslate_url=LIBRE_URL,
        libretranslate_api_key=None,
        libretranslate_mirror_url="",
        mymemory_url=MYMEMORY_URL,
        mymemory_email=None,
        glossary_path=None,
        provider_timeout_ms=5000,
        log_file=None,
    )

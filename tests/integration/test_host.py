"""
Integration tests against a running FixFlow host application.

Requires environment variables:
  FIXFLOW_BASE_URL : host serving POST /api/translate

Run: FIXFLOW_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest

from fixflow import FixFlow, Settings

SKIP = not os.environ.get("FIXFLOW_INTEGRATION")

pytestmark = pytest.mark.skipif(SKIP, reason="FIXFLOW_INTEGRATION not set")


def make_app(tmp_path) -> FixFlow:
    return FixFlow(settings=Settings(state_dir=tmp_path))


class TestTranslateEndpoint:
    @pytest.mark.asyncio
    async def test_translates_and_caches(self, tmp_path):
        async with make_app(tmp_path) as app:
            app.language.set_language("fi")
            first = await app.translate("Work orders")
            assert first
            assert app.toasts.toasts == ()
            assert await app.translate("Work orders") == first
            assert app.language.cache_info()[0] == 1

    @pytest.mark.asyncio
    async def test_unknown_target_fails_open(self, tmp_path):
        settings = Settings(state_dir=tmp_path, languages={"en": "English", "zz": "Nonexistent"})
        async with FixFlow(settings=settings) as app:
            app.language.set_language("zz")
            assert await app.translate("Hello") == "Hello"
            assert app.toasts.toasts

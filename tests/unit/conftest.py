from __future__ import annotations

import pytest

from revad import config as ad_config


@pytest.fixture(autouse=True)
def _restore_config():
    saved = (ad_config.debug, ad_config.fp_errors)
    yield
    ad_config.debug, ad_config.fp_errors = saved

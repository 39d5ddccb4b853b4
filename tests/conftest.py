from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_mcdist.config.configuration import reset_distributions_register
from pysatl_mcdist.random_source import DEFAULT_SEED, set_seed

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_registries() -> Generator[None, Any, None]:
    reset_distributions_register()
    set_seed(DEFAULT_SEED)
    yield

import matplotlib

matplotlib.use("Agg")

import pytest

from core.process import Process


@pytest.fixture
def single_long_process():
    return [Process(0, 0, [300])]


@pytest.fixture
def two_equal_processes():
    return [Process(0, 0, [250]), Process(1, 0, [250])]

"""
Общие fixtures для тестов.

tracker: свежий AllocationTracker; при teardown проверяется, что все
созданные через него матрицы освобождены ровно один раз.
"""

import pytest

from src.core.domain import AllocationTracker


@pytest.fixture
def tracker() -> AllocationTracker:
    """AllocationTracker с проверкой отсутствия утечек."""
    t = AllocationTracker()
    yield t
    assert t.live_count == 0, f"leaked matrices: {t.live_count}"
    assert t.live_elements == 0

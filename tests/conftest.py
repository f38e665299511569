import pytest
import logging
import matrixsolver as ms


@pytest.fixture(params=[False, True], scope="session")
def stop_at_stuck_row(request: pytest.FixtureRequest) -> bool:
    """Provide session-level fixture for both row reduction modes."""
    return request.param


@pytest.fixture
def system_2x2():
    """Augmented system 2x + y = 5, x - y = 1 (solution x=2, y=1)."""
    return ms.Matrix.from_array('S', [[2, 1, 5], [1, -1, 1]])


@pytest.fixture
def system_3x3():
    """Augmented system x + y + z = 6, 2y + 5z = -4, 2x + 5y - z = 27 (solution 5, 3, -2)."""
    return ms.Matrix.from_array('T', [[1, 1, 1, 6], [0, 2, 5, -4], [2, 5, -1, 27]])


@pytest.fixture
def error_kinds(caplog):
    """Return a function listing the error kinds logged so far."""
    caplog.set_level(logging.INFO)

    def kinds():
        return [getattr(r, ms.ERROR_KIND) for r in caplog.records if hasattr(r, ms.ERROR_KIND)]

    return kinds

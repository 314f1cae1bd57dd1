import pytest

from core.models import Activity, Scenario
from core.schema import LUMPSUM, PER_STUDENT

from tests.helpers import make_scenario


@pytest.fixture
def default_scenario() -> Scenario:
    return make_scenario()


@pytest.fixture
def simple_activities():
    return (
        Activity(1, "Feest", LUMPSUM, 1000.0),
        Activity(2, "Schoolreis", PER_STUDENT, 10.0, ("Groep 3", "Groep 4")),
        Activity(3, "Kamp", PER_STUDENT, 50.0, ("Groep 8",)),
    )

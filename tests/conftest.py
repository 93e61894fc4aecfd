import pytest

from uriparts.components import Fragment, Host, Pass, Path, Query, User

ENCODED_COMPONENTS = [User, Pass, Host, Path, Query, Fragment]


@pytest.fixture(params=ENCODED_COMPONENTS, ids=lambda cls: cls.__name__)
def encoded_component(request):
    """Fixture providing each component class run through the encoding engine."""
    return request.param


@pytest.fixture
def messy_input():
    """Fixture providing a value mixing raw, over-encoded and lowercase triplets."""
    return "a b%41%e2%82%ac~!$%zz"

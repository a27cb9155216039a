import pytest

from pconslist import plist


@pytest.fixture(autouse=True)
def add_plist(doctest_namespace):
    doctest_namespace['plist'] = plist

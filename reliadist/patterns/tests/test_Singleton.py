import pytest

from reliadist.patterns import Singleton


class Unique(metaclass=Singleton):
    def __init__(self, value=0):
        self.value = value


class DerivedUnique(Unique):
    pass


@pytest.fixture(autouse=True)
def fresh_instances(reset_singleton):
    reset_singleton(Unique)
    reset_singleton(DerivedUnique)


def test_Unique_unicity():
    a = Unique()
    b = Unique()
    assert a is b


def test_Unique_ignores_later_arguments():
    a = Unique(3)
    b = Unique(5)
    assert b is a
    assert b.value == 3


def test_DerivedUnique_unicity():
    a = DerivedUnique()
    b = DerivedUnique()
    assert a is b

    u = Unique()
    assert a is not u

"""Shared fixtures for the Part-DB tests."""

from types import SimpleNamespace

import pytest

from domain.structure.entities import Category
from domain.users.entities import Group, User


@pytest.fixture
def categories():
    """
    Electronics
        Passives
            Capacitors
            Resistors
        Semiconductors
    Mechanics
    """
    electronics = Category(id=1, name="Electronics")
    passives = Category(id=2, name="Passives", parent=electronics)
    capacitors = Category(id=3, name="Capacitors", parent=passives)
    resistors = Category(id=4, name="Resistors", parent=passives)
    semiconductors = Category(id=5, name="Semiconductors", parent=electronics)
    mechanics = Category(id=6, name="Mechanics")
    return SimpleNamespace(
        electronics=electronics,
        passives=passives,
        capacitors=capacitors,
        resistors=resistors,
        semiconductors=semiconductors,
        mechanics=mechanics,
        roots=[electronics, mechanics],
    )


@pytest.fixture
def groups():
    """staff > engineers"""
    staff = Group(id=1, name="staff")
    engineers = Group(id=2, name="engineers", parent=staff)
    return SimpleNamespace(staff=staff, engineers=engineers)


@pytest.fixture
def engineer(groups):
    return User(
        id=7,
        name="ada",
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        group=groups.engineers,
    )


def names(elements):
    return [element.name for element in elements]


@pytest.fixture
def as_names():
    return names

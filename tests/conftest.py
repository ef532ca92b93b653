"""Pytest fixtures for dynarray tests."""

import pytest

from dynarray import DynamicArray
from dynarray.testing import CountingComparator


@pytest.fixture
def empty_array():
    """Provide an empty array with default capacity."""
    return DynamicArray()


@pytest.fixture
def lesson_array():
    """Provide ["Aston", "Homework"]."""
    array = DynamicArray()
    array.append("Aston")
    array.append("Homework")
    return array


@pytest.fixture
def unsorted_numbers():
    """Provide the quicksort demo input [34, 7, 23, 32, 5, 62]."""
    array = DynamicArray()
    for value in (34, 7, 23, 32, 5, 62):
        array.append(value)
    return array


@pytest.fixture
def counting_comparator():
    """Provide a comparator that counts its calls."""
    return CountingComparator()

"""
Shared pytest fixtures for the schema generator tests.
"""
import pytest

from inference import infer_from_json_string

SAMPLE = '{"name":"John","age":30,"tags":["a","b"],"address":{"city":"NYC"}}'
DEEP = '{"a": {"b": {"c": 1}}}'


@pytest.fixture
def sample_root():
    return infer_from_json_string(SAMPLE)


@pytest.fixture
def deep_root():
    return infer_from_json_string(DEEP)


@pytest.fixture
def empty_root():
    return infer_from_json_string("{}")

"""Tests for ``POST /math/average``."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


def test_average_of_integers(client: TestClient) -> None:
    response = client.post("/math/average", json={"numbers": [10, 20, 30, 40]})

    assert response.status_code == 200
    data = response.json()
    assert data["input"] == {"numbers": [10, 20, 30, 40]}
    assert data["result"] == {"count": 4, "sum": 100, "average": 25}
    assert data["info"] == "This endpoint demonstrates reading data from the JSON body."


def test_average_of_single_element(client: TestClient) -> None:
    response = client.post("/math/average", json={"numbers": [7.5]})

    assert response.status_code == 200
    assert response.json()["result"] == {"count": 1, "sum": 7.5, "average": 7.5}


def test_average_uses_plain_left_to_right_addition(client: TestClient) -> None:
    numbers = [0.1, 0.2, 0.3]
    expected_sum = (0.1 + 0.2) + 0.3

    response = client.post("/math/average", json={"numbers": numbers})

    result = response.json()["result"]
    assert result["sum"] == expected_sum
    assert result["average"] == expected_sum / 3


def test_average_accepts_numeric_strings(client: TestClient) -> None:
    response = client.post("/math/average", json={"numbers": ["1", "2", "3", "4", "5"]})

    assert response.status_code == 200
    data = response.json()
    assert data["input"] == {"numbers": ["1", "2", "3", "4", "5"]}
    assert data["result"] == {"count": 5, "sum": 15, "average": 3}


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"numbers": []},
        {"numbers": "1,2,3"},
        {"numbers": {"a": 1}},
        {"numbers": None},
        {"other": [1, 2]},
        [1, 2, 3],
    ],
)
def test_average_rejects_missing_or_invalid_array(client: TestClient, body) -> None:
    response = client.post("/math/average", json=body)

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == 'Missing or invalid "numbers" array in JSON body.'
    assert data["example_body"] == {"numbers": [10, 20, 30, 40]}
    assert "result" not in data


def test_average_rejects_malformed_json(client: TestClient) -> None:
    response = client.post(
        "/math/average",
        content=b'{"numbers": [1, 2',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == 'Missing or invalid "numbers" array in JSON body.'


def test_average_rejects_empty_body(client: TestClient) -> None:
    response = client.post("/math/average")

    assert response.status_code == 400


@pytest.mark.parametrize(
    "numbers, bad_index",
    [
        (["a", 1], 0),
        ([1, "two", 3], 1),
        ([1, None], 1),
        ([1, 2, ""], 2),
        ([[1], 2], 0),
        ([1, "NaN"], 1),
        (["Infinity"], 0),
    ],
)
def test_average_rejects_non_numeric_elements(client: TestClient, numbers, bad_index: int) -> None:
    response = client.post("/math/average", json={"numbers": numbers})

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == 'All elements in "numbers" must be valid numeric values.'
    assert data["received"] == numbers
    assert data["invalid_element"] == {"index": bad_index, "value": numbers[bad_index]}
    assert data["example_valid_numbers"] == [1, 2.5, 100]


def test_average_rejects_overflowing_sum(client: TestClient) -> None:
    response = client.post("/math/average", json={"numbers": [1e308, 1e308]})

    assert response.status_code == 400
    assert response.json()["received"] == [1e308, 1e308]


def test_average_sums_in_floating_point(client: TestClient) -> None:
    response = client.post("/math/average", json={"numbers": [9007199254740993, 1]})

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["count"] == 2
    assert result["sum"] == 9007199254740992
    assert result["average"] == 4503599627370496


def test_average_renders_integral_results_as_integers(client: TestClient) -> None:
    response = client.post("/math/average", json={"numbers": [10, 20, 30, 40]})

    assert b'"sum":100,' in response.content
    assert b'"average":25}' in response.content


def test_average_rejects_non_ascii_digits(client: TestClient) -> None:
    response = client.post("/math/average", json={"numbers": ["٣", "１２"]})

    assert response.status_code == 400
    assert response.json()["invalid_element"] == {"index": 0, "value": "٣"}

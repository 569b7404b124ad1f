"""
Tests for the TheMealDB connector using mocked HTTP calls.

These tests patch requests.get to avoid making real API calls. They verify that:
- Each method calls the right endpoint with the right parameters
- {"meals": null} is treated as no results
- Malformed listings are skipped
- Transport, HTTP and JSON errors are wrapped in MealDBError
"""

import inspect
import os
from unittest.mock import Mock, patch

import pytest
import requests

from recipe_ideas.connectors import mealdb_connector
from recipe_ideas.connectors.mealdb_connector import MealDBConnector, MealDBError

BASE = "https://mealdb.test/api/json/v1/1"


def json_response(payload, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def connector():
    return MealDBConnector(base_url=BASE + "/", timeout=3)


class TestMealDBConnectorInit:
    """Tests for connector configuration."""

    def test_explicit_settings(self, connector):
        """Test that explicit base URL (trailing slash stripped) and timeout are used."""
        assert connector.base_url == BASE
        assert connector.timeout == 3
        assert connector.source == "mealdb"

    @patch.dict(os.environ, {"MEALDB_BASE_URL": "https://other.test/api/", "MEALDB_TIMEOUT_SECONDS": "7"})
    def test_settings_from_environment(self):
        """Test that env vars are used when no arguments are given."""
        connector = MealDBConnector()
        assert connector.base_url == "https://other.test/api"
        assert connector.timeout == 7.0

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults_without_environment(self):
        """Test the public v1 URL and 15 s timeout when nothing is configured."""
        connector = MealDBConnector()
        assert connector.base_url == "https://www.themealdb.com/api/json/v1/1"
        assert connector.timeout == 15.0

    @patch.dict(os.environ, {"MEALDB_TIMEOUT_SECONDS": "soon"})
    def test_malformed_timeout_falls_back_to_default(self):
        """Test that an unparsable timeout uses the default."""
        assert MealDBConnector(base_url=BASE).timeout == 15.0

    @patch.dict(os.environ, {"MEALDB_TIMEOUT_SECONDS": "-2"})
    def test_non_positive_timeout_falls_back_to_default(self):
        assert MealDBConnector(base_url=BASE).timeout == 15.0

    def test_connector_does_not_depend_on_web_layer(self):
        """Test that the core connector reads its settings without importing api/."""
        source = inspect.getsource(mealdb_connector)
        assert "from api" not in source
        assert "import api" not in source

    def test_fallback_url(self, connector):
        """Test the TheMealDB page URL."""
        assert connector.fallback_url("52772") == "https://www.themealdb.com/meal/52772"


class TestMealDBListings:
    """Tests for listing endpoints."""

    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_filter_by_ingredient(self, mock_get, connector):
        """Test filter.php?i= is called and listings are validated."""
        mock_get.return_value = json_response({
            "meals": [
                {"idMeal": "52795", "strMeal": "Chicken Handi", "strMealThumb": "https://img/1.jpg"},
                {"idMeal": 52796, "strMeal": "Chicken Alfredo", "strMealThumb": "https://img/2.jpg"},
            ]
        })

        listings = connector.filter_by_ingredient("chicken breast")

        mock_get.assert_called_once_with(f"{BASE}/filter.php", params={"i": "chicken breast"}, timeout=3)
        assert [l.idMeal for l in listings] == ["52795", "52796"]
        assert listings[0].strMeal == "Chicken Handi"
        assert listings[0].strCategory is None

    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_filter_by_category(self, mock_get, connector):
        """Test filter.php?c= is called."""
        mock_get.return_value = json_response({"meals": [{"idMeal": "1", "strMeal": "Fish pie"}]})

        listings = connector.filter_by_category("Seafood")

        mock_get.assert_called_once_with(f"{BASE}/filter.php", params={"c": "Seafood"}, timeout=3)
        assert len(listings) == 1

    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_generic_search(self, mock_get, connector):
        """Test search.php?s= with an empty name, keeping strCategory."""
        mock_get.return_value = json_response({
            "meals": [{"idMeal": "1", "strMeal": "Apam balik", "strCategory": "Dessert"}]
        })

        listings = connector.search_by_name("")

        mock_get.assert_called_once_with(f"{BASE}/search.php", params={"s": ""}, timeout=3)
        assert listings[0].strCategory == "Dessert"

    @pytest.mark.parametrize("payload", [{"meals": None}, {"meals": []}, {}])
    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_null_meals_is_empty(self, mock_get, payload, connector):
        """Test that null, empty or missing meals give an empty list."""
        mock_get.return_value = json_response(payload)
        assert connector.filter_by_ingredient("unobtainium") == []

    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_malformed_listing_is_skipped(self, mock_get, connector):
        """Test that an entry without idMeal is dropped and the rest kept."""
        mock_get.return_value = json_response({
            "meals": [{"strMeal": "No id"}, {"idMeal": "2", "strMeal": "Has id"}]
        })

        listings = connector.filter_by_ingredient("x")

        assert [l.idMeal for l in listings] == ["2"]

    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_list_categories(self, mock_get, connector):
        """Test list.php?c=list returns category names."""
        mock_get.return_value = json_response({
            "meals": [{"strCategory": "Beef"}, {"strCategory": "Breakfast"}, {"strCategory": None}]
        })

        assert connector.list_categories() == ["Beef", "Breakfast"]
        mock_get.assert_called_once_with(f"{BASE}/list.php", params={"c": "list"}, timeout=3)


class TestMealDBLookup:
    """Tests for lookup.php."""

    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_lookup_returns_first_meal(self, mock_get, connector):
        """Test that lookup validates the first meal into a DetailRecord."""
        mock_get.return_value = json_response({
            "meals": [{
                "idMeal": "52772",
                "strMeal": "Teriyaki Chicken Casserole",
                "strInstructions": "Preheat oven.",
                "strCategory": "Chicken",
                "strArea": "Japanese",
                "strTags": "Meat,Casserole",
                "strSource": None,
                "strYoutube": "https://www.youtube.com/watch?v=4aZr5hZXP_s",
                "strIngredient1": "soy sauce",
            }]
        })

        detail = connector.lookup(52772)

        mock_get.assert_called_once_with(f"{BASE}/lookup.php", params={"i": "52772"}, timeout=3)
        assert detail.strArea == "Japanese"
        assert detail.strSource is None
        assert detail.strYoutube.startswith("https://www.youtube.com")

    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_lookup_unknown_id_returns_none(self, mock_get, connector):
        """Test that {"meals": null} gives None."""
        mock_get.return_value = json_response({"meals": None})
        assert connector.lookup("0") is None


class TestMealDBErrors:
    """Tests for error wrapping."""

    @pytest.mark.parametrize(
        "error",
        [
            requests.exceptions.Timeout("read timed out"),
            requests.exceptions.ConnectionError("DNS failure"),
        ],
    )
    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_transport_errors(self, mock_get, error, connector):
        """Test that timeouts and connection errors raise MealDBError."""
        mock_get.side_effect = error
        with pytest.raises(MealDBError, match="filter.php"):
            connector.filter_by_ingredient("chicken")

    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_http_status_error(self, mock_get, connector):
        """Test that a non-2xx response raises MealDBError."""
        mock_get.return_value = json_response({}, status_code=503)
        with pytest.raises(MealDBError):
            connector.lookup("1")

    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_invalid_json(self, mock_get, connector):
        """Test that an unparsable body raises MealDBError."""
        response = json_response(None)
        response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = response
        with pytest.raises(MealDBError, match="Invalid JSON"):
            connector.search_by_name("")

    @patch("recipe_ideas.connectors.mealdb_connector.requests.get")
    def test_unexpected_shape(self, mock_get, connector):
        """Test that a non-object body or non-list meals raises MealDBError."""
        mock_get.return_value = json_response(["not", "a", "dict"])
        with pytest.raises(MealDBError):
            connector.filter_by_category("Beef")

        mock_get.return_value = json_response({"meals": "nope"})
        with pytest.raises(MealDBError):
            connector.filter_by_category("Beef")

    def test_error_is_runtime_error(self):
        """Test that MealDBError follows the RuntimeError connector convention."""
        assert issubclass(MealDBError, RuntimeError)

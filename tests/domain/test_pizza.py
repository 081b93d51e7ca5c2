"""Unit tests for pizza customization parsing and validation."""

import pytest

from pizzeria.domain.exceptions import InvalidPizzaError
from pizzeria.domain.model.pizza import PizzaCustomization, Toppings, validate_pizza


class TestValidatePizzaHappyPath:

    def test_minimal_pizza_accepted(self):
        pizza = validate_pizza({"size": "medium", "sauce": "regular", "cheese": "extra"})
        assert pizza == PizzaCustomization(size="medium", sauce="regular", cheese="extra")

    def test_toppings_default_to_empty(self):
        pizza = validate_pizza({"size": "medium", "sauce": "regular", "cheese": "extra"})
        assert pizza.toppings == Toppings()
        assert pizza.toppings.count == 0
        assert pizza.crust is None

    def test_full_pizza(self):
        pizza = validate_pizza({
            "size": "large",
            "crust": "thin",
            "sauce": "alfredo",
            "cheese": "regular",
            "toppings": {"meats": ["ham", "bacon"], "vegetables": ["peppers"]},
        })
        assert pizza.crust == "thin"
        assert pizza.toppings.meats == ("ham", "bacon")
        assert pizza.toppings.vegetables == ("peppers",)
        assert pizza.toppings.count == 3

    def test_only_one_topping_category(self):
        pizza = validate_pizza({
            "size": "small", "sauce": "light", "cheese": "none",
            "toppings": {"vegetables": ["olives"]},
        })
        assert pizza.toppings.meats == ()
        assert pizza.toppings.vegetables == ("olives",)

    def test_unknown_keys_are_ignored(self):
        pizza = validate_pizza({
            "size": "medium", "sauce": "regular", "cheese": "regular",
            "payment": {"token": "x"}, "customer": {"name": "Giorno"},
        })
        assert pizza.size == "medium"

    def test_values_are_not_checked_against_menu(self):
        pizza = validate_pizza({"size": "gigantic", "sauce": "bbq", "cheese": "vegan"})
        assert pizza.size == "gigantic"


class TestValidatePizzaRejections:

    @pytest.mark.parametrize("raw", [
        {},
        {"size": "medium"},
        {"size": "medium", "sauce": "regular"},
        {"sauce": "regular", "cheese": "regular"},
        {"size": "", "sauce": "regular", "cheese": "regular"},
        {"size": "medium", "sauce": None, "cheese": "regular"},
        {"customer": {"name": "Giorno"}},
    ])
    def test_missing_required_fields(self, raw):
        with pytest.raises(InvalidPizzaError, match="Invalid pizza provided"):
            validate_pizza(raw)

    @pytest.mark.parametrize("raw", [None, [], "medium", 42])
    def test_non_object_body(self, raw):
        with pytest.raises(InvalidPizzaError):
            validate_pizza(raw)

    def test_non_string_size(self):
        with pytest.raises(InvalidPizzaError):
            validate_pizza({"size": 12, "sauce": "regular", "cheese": "regular"})

    def test_non_string_crust(self):
        with pytest.raises(InvalidPizzaError):
            validate_pizza({"size": "small", "crust": 1, "sauce": "regular", "cheese": "regular"})

    def test_toppings_must_be_object(self):
        with pytest.raises(InvalidPizzaError):
            validate_pizza({
                "size": "small", "sauce": "regular", "cheese": "regular",
                "toppings": ["pepperoni"],
            })

    def test_topping_names_must_be_strings(self):
        with pytest.raises(InvalidPizzaError):
            validate_pizza({
                "size": "small", "sauce": "regular", "cheese": "regular",
                "toppings": {"meats": [1, 2]},
            })


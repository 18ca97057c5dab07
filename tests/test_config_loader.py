from __future__ import annotations

import pytest

from codeforge.core.config_loader import ConfigLoader
from codeforge.core.exceptions import ConfigurationError
from codeforge.core.models import GenerationConfiguration


def test_load_full_recipe(tmp_path):
    recipe = tmp_path / "vouchers.yaml"
    recipe.write_text(
        "quantity: 10\n"
        "generator: sequential\n"
        "configuration:\n"
        "  charset: '0123456789'\n"
        "  pattern: 'XXX-XXX'\n"
        "  prefix: 'GIFT-'\n"
        "validators:\n"
        "  max_repeated_characters: {max_repeats: 1}\n"
        "  regex:\n"
    )

    request = ConfigLoader.load_request(recipe)

    assert request.quantity == 10
    assert request.generator == "sequential"
    assert request.configuration == GenerationConfiguration(
        charset="0123456789", pattern="XXX-XXX", prefix="GIFT-"
    )
    assert list(request.validators) == ["max_repeated_characters", "regex"]
    assert request.validators["regex"] is None


def test_empty_recipe_uses_defaults(tmp_path):
    recipe = tmp_path / "empty.yaml"
    recipe.write_text("")

    request = ConfigLoader.load_request(recipe)

    assert request.quantity == 42
    assert request.generator == "random"
    assert request.validators == {}


def test_missing_recipe(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigLoader.load_request(tmp_path / "missing.yaml")


def test_malformed_yaml(tmp_path):
    recipe = tmp_path / "broken.yaml"
    recipe.write_text("quantity: [1, 2\n")

    with pytest.raises(ConfigurationError):
        ConfigLoader.load_request(recipe)


def test_non_mapping_recipe(tmp_path):
    recipe = tmp_path / "list.yaml"
    recipe.write_text("- 1\n- 2\n")

    with pytest.raises(ConfigurationError):
        ConfigLoader.load_request(recipe)


def test_unknown_configuration_field(tmp_path):
    recipe = tmp_path / "typo.yaml"
    recipe.write_text("configuration:\n  lenght: 6\n")

    with pytest.raises(ConfigurationError):
        ConfigLoader.load_request(recipe)

from __future__ import annotations

import pytest

from pustaka.config import EngineSettings


def test_defaults_apply_for_empty_environment() -> None:
    settings = EngineSettings.from_env({})

    assert settings.min_token_length == 3
    assert settings.exact_match_threshold == 8
    assert settings.recommendation_limit == 3
    assert settings.suggestion_limit == 5
    assert settings.description_seed is None
    assert settings.log_level == "INFO"


def test_values_are_read_from_environment() -> None:
    settings = EngineSettings.from_env(
        {
            "PUSTAKA_MIN_TOKEN_LENGTH": "2",
            "PUSTAKA_EXACT_MATCH_THRESHOLD": "5",
            "PUSTAKA_RECOMMENDATION_LIMIT": "4",
            "PUSTAKA_SUGGESTION_LIMIT": "10",
            "PUSTAKA_DESCRIPTION_SEED": "42",
            "PUSTAKA_LOG_LEVEL": "debug",
        }
    )

    assert settings.min_token_length == 2
    assert settings.exact_match_threshold == 5
    assert settings.recommendation_limit == 4
    assert settings.suggestion_limit == 10
    assert settings.description_seed == 42
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("PUSTAKA_MIN_TOKEN_LENGTH", "0"),
        ("PUSTAKA_EXACT_MATCH_THRESHOLD", "many"),
        ("PUSTAKA_RECOMMENDATION_LIMIT", ""),
        ("PUSTAKA_SUGGESTION_LIMIT", "-1"),
        ("PUSTAKA_DESCRIPTION_SEED", "abc"),
        ("PUSTAKA_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_fail_fast_naming_the_variable(name: str, value: str) -> None:
    with pytest.raises(ValueError, match=name):
        EngineSettings.from_env({name: value})

from __future__ import annotations

import pytest

from nda_validator.domain.entities.schema import RequirementLevel, SchemaField

_CONFIG_ENV_VARS = (
    "NDA_VALIDATOR_MAX_SUGGESTIONS",
    "NDA_VALIDATOR_SUGGESTION_THRESHOLD",
    "NDA_VALIDATOR_FUZZY_SUGGESTIONS",
    "NDA_VALIDATOR_QUOTE_EXPORTED_CELLS",
    "NDA_VALIDATOR_ENCODING",
)


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer NDA_VALIDATOR_* settings out of the test run."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def demographics_fields() -> list[SchemaField]:
    """A small demographics02-like structure."""
    return [
        SchemaField(name="subjectkey", requirement_level=RequirementLevel.REQUIRED),
        SchemaField(
            name="interview_age",
            requirement_level=RequirementLevel.REQUIRED,
            value_range="0::1260",
        ),
        SchemaField(
            name="sex",
            requirement_level=RequirementLevel.REQUIRED,
            value_range="M;F;O;NR",
        ),
        SchemaField(
            name="handedness",
            requirement_level=RequirementLevel.RECOMMENDED,
            value_range="R;L",
        ),
        SchemaField(
            name="consent_flag",
            requirement_level=RequirementLevel.RECOMMENDED,
            value_range="0;1",
        ),
        SchemaField(name="comments_misc", aliases=("comments",)),
    ]


@pytest.fixture
def valid_csv_text() -> str:
    return (
        "subjectkey,interview_age,sex,handedness,consent_flag\n"
        "NDAR_INV001,240,M,left,true\n"
        "NDAR_INV002,300,F,R,0\n"
    )


@pytest.fixture
def template_csv_text() -> str:
    return (
        "demographics,02\n"
        "subjectkey,interview_age,sex,handedness,consent_flag\n"
        "NDAR_INV001,240,M,L,1\n"
    )

import json
from pathlib import Path

import pytest

from hutlines.config_loader import CatalogFile, rules_from_entries


def test_load_catalog_list(tmp_path: Path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {"id": "x1", "type": "forward", "boost": "2 OVR", "teams": ["ANA", "ANA", "ANA"]},
                {"id": "x2", "type": "defense", "boost": "5 AP", "teams": ["LAK", "PIT"], "status": "+2"},
            ]
        )
    )

    catalog = CatalogFile.load(path)

    assert [rule.rule_id for rule in catalog.rules] == ["x1", "x2"]
    assert catalog.rules[0].requirements == ("ANA", "ANA", "ANA")
    assert catalog.rules[1].status == "+2"


def test_load_catalog_wrapped_object(tmp_path: Path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps({"combinations": [{"id": "x1", "type": "defense", "boost": "1 OVR", "teams": ["BOS", "BOS"]}]})
    )

    assert len(CatalogFile.load(path).rules) == 1


def test_missing_keys_raise_value_error():
    with pytest.raises(ValueError, match="entry 0 is missing teams"):
        rules_from_entries([{"id": "x1", "type": "forward", "boost": "2 OVR"}])


def test_string_teams_rejected():
    with pytest.raises(ValueError):
        rules_from_entries([{"id": "x1", "type": "forward", "boost": "2 OVR", "teams": "ANA"}])


def test_mismatched_team_count_is_kept():
    rules = rules_from_entries([{"id": "x1", "type": "forward", "boost": "2 OVR", "teams": ["ANA", "ANA"]}])
    assert rules[0].size == 3
    assert len(rules[0].requirements) == 2


def test_numeric_status_is_stored_as_text():
    rules = rules_from_entries(
        [{"id": "x1", "type": "forward", "boost": "2 OVR", "teams": ["ANA", "ANA", "ANA"], "status": 2}]
    )

    assert rules[0].status == "2"

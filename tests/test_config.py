"""Tests for configuration loading, merging and tokenizer construction."""

from pathlib import Path

import pytest
import yaml

from scope_splitter.build_tokenizer import (
    build_tokenizer,
    parse_delimiter,
    split_options_from_config,
)
from scope_splitter.compute_config_hash import compute_config_hash
from scope_splitter.deep_merge import deep_merge
from scope_splitter.delimiter import Delimiter
from scope_splitter.load_config import DEFAULT_CONFIG, load_config
from scope_splitter.split_options import SplitOptions
from scope_splitter.split_type import SplitType


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_delimiter_lists_replace() -> None:
    """Verify that delimiter lists are replaced, preserving the new order."""
    base = {"array_delimiters": ["[,]"]}
    update = {"array_delimiters": ["<,>", "(,)"]}
    merged = deep_merge(base, update)
    assert merged == {"array_delimiters": ["<,>", "(,)"]}


def test_deep_merge_escape_characters_accumulate() -> None:
    """Verify that escape characters accumulate in first-seen order."""
    base = {"escape_characters": ["^", "\\"]}
    update = {"escape_characters": ["\\", "`"]}
    merged = deep_merge(base, update)
    assert merged["escape_characters"] == ["^", "\\", "`"]
    assert base == {"escape_characters": ["^", "\\"]}


def test_deep_merge_single_escape_character() -> None:
    """Verify that a bare escape character is added as one entry."""
    merged = deep_merge({"escape_characters": ["^"]}, {"escape_characters": "\\"})
    assert merged["escape_characters"] == ["^", "\\"]


def test_deep_merge_without_accumulated_sections() -> None:
    """Verify that every list is replaced when nothing accumulates."""
    base = {"escape_characters": ["^"]}
    update = {"escape_characters": ["`"]}
    assert deep_merge(base, update, accumulated=()) == update


def test_compute_config_hash_stability() -> None:
    """Verify that config hash is stable regardless of key order."""
    config1 = {"escape_characters": ["\\"], "array_delimiters": ["[,]"]}
    config2 = {"array_delimiters": ["[,]"], "escape_characters": ["\\"]}
    assert compute_config_hash(config1) == compute_config_hash(config2)


def test_compute_config_hash_ignores_unknown_keys() -> None:
    """Verify that keys unrelated to splitting do not change the hash."""
    config = {"array_delimiters": ["[,]"]}
    assert compute_config_hash(config) == compute_config_hash(
        {**config, "comment": "unused"}
    )
    assert compute_config_hash(config) != compute_config_hash(
        {"array_delimiters": ["(,)"]}
    )


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG


def test_load_config_missing_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a missing file falls back to defaults with a warning."""
    config = load_config(str(tmp_path / "absent.yml"))
    assert config == DEFAULT_CONFIG
    assert "Configuration file not found" in caplog.text


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "array_delimiters": [{"start": "[", "separator": ",", "end": "]"}],
        "escape_characters": ["\\"],
        "remove_empty_entries": True,
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["array_delimiters"] == config_data["array_delimiters"]
    assert loaded["object_delimiters"] == []
    assert loaded["escape_characters"] == ["\\"]
    assert loaded["remove_empty_entries"] is True


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a YAML list at the root is rejected."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- not\n- a mapping\n")
    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(str(config_file))


def test_parse_delimiter_forms() -> None:
    """Verify mapping and shorthand delimiter entries."""
    assert parse_delimiter({"start": "[", "separator": ",", "end": "]"}) == Delimiter(
        "[", ",", "]"
    )
    assert parse_delimiter({"start": '"', "end": '"'}) == Delimiter('"', "", '"')
    assert parse_delimiter("{;}") == Delimiter("{", ";", "}")
    assert parse_delimiter("''") == Delimiter("'", "", "'")


@pytest.mark.parametrize(
    "entry",
    [
        "[",
        "[,,]",
        {"start": "[["},
        {"start": "[", "end": ""},
        {"start": "[", "separator": ",,", "end": "]"},
        42,
    ],
)
def test_parse_delimiter_invalid(entry: object) -> None:
    """Verify that malformed delimiter entries are rejected."""
    with pytest.raises(ValueError, match="Delimiter"):
        parse_delimiter(entry)


def test_build_tokenizer_from_config() -> None:
    """Verify that a configured tokenizer splits with every dialect."""
    config = deep_merge(
        DEFAULT_CONFIG,
        {
            "array_delimiters": ["[,]"],
            "object_delimiters": [{"start": "{", "separator": ";", "end": "}"}],
            "non_parsable_data_delimiters": ['""'],
            "escape_characters": ["\\"],
        },
    )
    tokenizer = build_tokenizer(config)
    assert tokenizer.array_delimiters == [Delimiter("[", ",", "]")]
    assert tokenizer.object_delimiters == [Delimiter("{", ";", "}")]
    assert tokenizer.non_parsable_data_delimiters == [Delimiter('"', "", '"')]
    assert tokenizer.escape_characters == ["\\"]

    result = tokenizer.try_split('{a; "b; c"; [d; e]}')
    assert result.split_type is SplitType.OBJECT
    assert result.items == ["a", '"b; c"', "[d; e]"]


def test_build_tokenizer_rejects_long_escape() -> None:
    """Verify that escape characters must be single characters."""
    with pytest.raises(ValueError, match="Escape character"):
        build_tokenizer({"escape_characters": ["\\\\"]})


def test_split_options_from_config() -> None:
    """Verify mapping of the remove_empty_entries flag."""
    assert split_options_from_config(DEFAULT_CONFIG) is SplitOptions.KEEP_EMPTY
    assert (
        split_options_from_config({"remove_empty_entries": True})
        is SplitOptions.REMOVE_EMPTY
    )

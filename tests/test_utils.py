import json
from pathlib import Path

import pytest

import utils
from models import ErrorCode, SelectionMode, SortMode, UnjumbleError
from utils import build_options, default_dictionary_path, validate_include, validate_letters


def test_validate_letters_checks_length_before_content() -> None:
    assert validate_letters("PoTs") == "PoTs"
    with pytest.raises(UnjumbleError) as exc:
        validate_letters("a1")
    assert exc.value.code is ErrorCode.MORE_LETTERS


def test_validate_letters_rejects_non_ascii_letters() -> None:
    with pytest.raises(UnjumbleError) as exc:
        validate_letters("café")
    assert exc.value.code is ErrorCode.INVALID_LETTERS


def test_validate_include_requires_single_letter() -> None:
    assert validate_include("z") == "z"
    for bad in ["", "zz", "1"]:
        with pytest.raises(UnjumbleError) as exc:
            validate_include(bad)
        assert exc.value.code is ErrorCode.PARAMS


def test_build_options_maps_sort_requests() -> None:
    assert build_options(None, None).sort_mode is None
    assert build_options("alphabetical", None).sort_mode is SortMode.ALPHABETICAL

    by_length = build_options("by-length", "q")
    assert by_length.sort_mode is SortMode.BY_LENGTH
    assert by_length.selection_mode is SelectionMode.ALL
    assert by_length.required_letter == "q"

    longest = build_options("longest", None)
    assert longest.sort_mode is SortMode.BY_LENGTH
    assert longest.selection_mode is SelectionMode.LONGEST

    with pytest.raises(UnjumbleError):
        build_options("random", None)


def test_default_dictionary_path_prefers_config() -> None:
    assert default_dictionary_path({}) == "/usr/share/dict/words"
    assert default_dictionary_path({"dictionary_path": "  "}) == "/usr/share/dict/words"
    assert default_dictionary_path({"dictionary_path": "/tmp/words.txt"}) == "/tmp/words.txt"


def test_load_config_reads_json_and_tolerates_garbage(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.json"
    monkeypatch.setattr(utils, "CONFIG_PATH", config_path)
    assert utils.load_config() == {}

    config_path.write_text(json.dumps({"dictionary_path": "words.txt"}), encoding="utf-8")
    assert utils.load_config() == {"dictionary_path": "words.txt"}

    config_path.write_text("{not json", encoding="utf-8")
    assert utils.load_config() == {}

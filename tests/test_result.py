import dataclasses

import pytest

from brain.result import ClassificationResult, METHOD_HEURISTIC, METHOD_MODEL
from brain.utils_text import compact, matched_keywords, unique_compact


def test_to_dict_uses_wire_keys():
    result = ClassificationResult(True, "응원 키워드", METHOD_HEURISTIC)

    assert result.to_dict() == {
        "isEncouragement": True,
        "reason": "응원 키워드",
        "method": "heuristic",
    }


def test_result_is_frozen():
    result = ClassificationResult(False, "이유", METHOD_MODEL)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.reason = "변경"


@pytest.mark.parametrize("reason", ["", "   "])
def test_empty_reason_is_rejected(reason):
    with pytest.raises(ValueError):
        ClassificationResult(True, reason, METHOD_MODEL)


def test_unknown_method_is_rejected():
    with pytest.raises(ValueError):
        ClassificationResult(True, "이유", "keyword")


def test_compact_lowercases_and_drops_all_whitespace():
    assert compact(" Hello  World\n탭\t있음 ") == "helloworld탭있음"
    assert compact("") == ""


def test_unique_compact_merges_spacing_variants():
    assert unique_compact(["할 수 있어", "할수있어", "  ", "힘내"]) == ("할수있어", "힘내")


def test_matched_keywords_is_substring_based():
    # 단어 경계를 보지 않는다
    assert matched_keywords("안좋아", ("좋아", "최고")) == ["좋아"]
    assert matched_keywords("", ("좋아",)) == []


def test_text_utils_expose_only_matching_helpers():
    from brain import utils_text

    assert not hasattr(utils_text, "contains_any")


@pytest.mark.parametrize(
    "raw, expected",
    [(None, True), ("false", False), ("0", False), ("YES", True), (" on ", True)],
)
def test_env_bool(monkeypatch, raw, expected):
    from core import config

    if raw is None:
        monkeypatch.delenv("ENCOURAGEMENT_TEST_FLAG", raising=False)
    else:
        monkeypatch.setenv("ENCOURAGEMENT_TEST_FLAG", raw)

    assert config._env_bool("ENCOURAGEMENT_TEST_FLAG", True) is expected
    assert not hasattr(config, "BASE_DIR")

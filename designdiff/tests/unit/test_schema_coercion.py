from __future__ import annotations

from designdiff.base.dto import AnalysisResult, CodeGenResult, TechStackResult


def test_unknown_enum_values_are_coerced():
    result = AnalysisResult.model_validate(
        {
            "differences": [{"type": "animation", "severity": "critical", "description": "x"}],
            "suggestions": [{"type": "refactor", "priority": "urgent", "estimatedEffort": "huge"}],
            "confidence": 0.5,
        }
    )
    diff, sug = result.differences[0], result.suggestions[0]
    assert (diff.type, diff.severity) == ("analysis", "medium")  # nosec B101 - pytest assertion in tests
    assert (sug.type, sug.priority, sug.estimated_effort) == ("general", "medium", "moderate")  # nosec B101 - pytest assertion in tests


def test_enum_matching_is_case_insensitive():
    result = AnalysisResult.model_validate({"differences": [{"type": "Color", "severity": "HIGH"}]})
    assert (result.differences[0].type, result.differences[0].severity) == ("color", "high")  # nosec B101 - pytest assertion in tests


def test_missing_ids_assigned_sequentially():
    result = AnalysisResult.model_validate(
        {"differences": [{"description": "a"}, {"id": "keep"}, {"description": "c"}], "suggestions": [{}]}
    )
    assert [d.id for d in result.differences] == ["1", "keep", "3"]  # nosec B101 - pytest assertion in tests
    assert result.suggestions[0].id == "1"  # nosec B101 - pytest assertion in tests


def test_confidence_clamped_and_defaulted():
    assert AnalysisResult.model_validate({"confidence": 3000}).confidence == 1.0  # nosec B101 - pytest assertion in tests
    assert AnalysisResult.model_validate({"confidence": -2}).confidence == 0.0  # nosec B101 - pytest assertion in tests
    assert AnalysisResult.model_validate({"confidence": "85%"}).confidence == 0.85  # nosec B101 - pytest assertion in tests
    assert AnalysisResult.model_validate({"confidence": "high"}).confidence == 0.7  # nosec B101 - pytest assertion in tests
    assert AnalysisResult.model_validate({}).confidence == 0.7  # nosec B101 - pytest assertion in tests


def test_null_lists_become_empty():
    result = AnalysisResult.model_validate({"differences": None, "suggestions": None})
    assert result.differences == [] and result.suggestions == []  # nosec B101 - pytest assertion in tests
    stack = TechStackResult.model_validate({"detectedFiles": None, "platform": "tv"})
    assert stack.detected_files == [] and stack.platform == "web"  # nosec B101 - pytest assertion in tests
    gen = CodeGenResult.model_validate({"dependencies": None, "suggestions": None})
    assert gen.dependencies == [] and gen.suggestions == []  # nosec B101 - pytest assertion in tests


def test_snake_and_camel_input_accepted_and_extras_kept():
    result = AnalysisResult.model_validate(
        {"differences": [{"current_value": "a", "targetValue": "b", "selector": ".hero"}]}
    )
    dumped = result.to_dict()["differences"][0]
    assert dumped["currentValue"] == "a" and dumped["targetValue"] == "b"  # nosec B101 - pytest assertion in tests
    assert dumped["selector"] == ".hero"  # nosec B101 - pytest assertion in tests


def test_non_string_values_rendered_as_text():
    result = AnalysisResult.model_validate({"differences": [{"id": 7, "currentValue": 16, "targetValue": None}]})
    diff = result.differences[0]
    assert (diff.id, diff.current_value, diff.target_value) == ("7", "16", "")  # nosec B101 - pytest assertion in tests


def test_confidence_above_one_clamps_instead_of_scaling():
    values = [0.95, 1.2, 1.5, 2, 85, 101, 10**400]
    coerced = [AnalysisResult.model_validate({"confidence": v}).confidence for v in values]
    assert coerced == [0.95, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0]  # nosec B101 - pytest assertion in tests
    assert coerced == sorted(coerced)  # nosec B101 - pytest assertion in tests
    assert AnalysisResult.model_validate({"confidence": "120%"}).confidence == 1.0  # nosec B101 - pytest assertion in tests
    assert AnalysisResult.model_validate({"confidence": "1.5"}).confidence == 1.0  # nosec B101 - pytest assertion in tests

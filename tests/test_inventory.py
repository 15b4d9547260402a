"""Unit tests for claudio.inventory."""

import json
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from claudio.errors import MissingDependencyError, NoModelsFoundError
from claudio.inventory import list_models, parse_model_keys


def make_result(stdout=b"", stderr=b"", returncode=0):
    """Return a mock CompletedProcess-like object."""
    result = MagicMock()
    result.stdout = stdout
    result.stderr = stderr
    result.returncode = returncode
    return result


def lms_json(*entries) -> bytes:
    return json.dumps(list(entries)).encode()


class TestParseModelKeys:
    def test_keeps_order_and_skips_blank_keys(self):
        payload = lms_json({"modelKey": "a"}, {"modelKey": ""}, {"modelKey": "b"})
        assert parse_model_keys(payload) == ["a", "b"]

    def test_skips_missing_null_and_whitespace_keys(self):
        payload = lms_json({}, {"modelKey": None}, {"modelKey": "  \t"}, {"modelKey": "c"})
        assert parse_model_keys(payload) == ["c"]

    def test_kept_keys_are_not_trimmed(self):
        assert parse_model_keys(lms_json({"modelKey": " qwen "})) == [" qwen "]

    def test_ignores_other_fields(self):
        payload = lms_json(
            {"type": "llm", "modelKey": "qwen2.5-7b", "sizeBytes": 4000, "path": "x/y"}
        )
        assert parse_model_keys(payload) == ["qwen2.5-7b"]

    def test_accepts_text_payload(self):
        assert parse_model_keys('[{"modelKey": "a"}]') == ["a"]

    @pytest.mark.parametrize(
        "payload",
        [b"not json", b'{"modelKey": "a"}', b'[{"modelKey": 3}]', b'["a"]', b""],
    )
    def test_rejects_unexpected_shapes(self, payload):
        with pytest.raises(ValidationError):
            parse_model_keys(payload)


class TestListModels:
    @patch("claudio.inventory.subprocess.run")
    def test_returns_keys(self, mock_run):
        mock_run.return_value = make_result(
            stdout=lms_json({"modelKey": "a"}, {"modelKey": ""}, {"modelKey": "b"})
        )
        assert list_models() == ["a", "b"]
        mock_run.assert_called_once_with(["lms", "ls", "--llm", "--json"], capture_output=True)

    @patch("claudio.inventory.subprocess.run")
    def test_uses_configured_program(self, mock_run):
        mock_run.return_value = make_result(stdout=lms_json({"modelKey": "a"}))
        list_models("/opt/lmstudio/bin/lms")
        assert mock_run.call_args[0][0][0] == "/opt/lmstudio/bin/lms"

    @patch("claudio.inventory.subprocess.run")
    def test_missing_program(self, mock_run):
        mock_run.side_effect = FileNotFoundError("lms")
        with pytest.raises(MissingDependencyError) as exc_info:
            list_models()
        assert str(exc_info.value) == "claudio: missing dependency: lms"
        assert exc_info.value.exit_code == 1

    @patch("claudio.inventory.subprocess.run")
    def test_unexecutable_program_is_missing_dependency(self, mock_run):
        mock_run.side_effect = PermissionError("lms")
        with pytest.raises(MissingDependencyError):
            list_models()

    @patch("claudio.inventory.subprocess.run")
    def test_non_zero_exit(self, mock_run):
        mock_run.return_value = make_result(
            stdout=lms_json({"modelKey": "a"}), stderr=b"server not running", returncode=1
        )
        with pytest.raises(NoModelsFoundError) as exc_info:
            list_models()
        assert str(exc_info.value) == "claudio: no models found (try: lms ls --llm)"

    @patch("claudio.inventory.subprocess.run")
    def test_malformed_output(self, mock_run):
        mock_run.return_value = make_result(stdout=b"Error: no models\n")
        with pytest.raises(NoModelsFoundError):
            list_models()

    @patch("claudio.inventory.subprocess.run")
    def test_empty_list(self, mock_run):
        mock_run.return_value = make_result(stdout=b"[]")
        with pytest.raises(NoModelsFoundError):
            list_models()

    @patch("claudio.inventory.subprocess.run")
    def test_only_blank_keys(self, mock_run):
        mock_run.return_value = make_result(stdout=lms_json({"modelKey": " "}, {}))
        with pytest.raises(NoModelsFoundError):
            list_models()

"""
Tests for the ambient layers around the scoring core.

Covers input validation, error handling, logging and configuration.
"""

import json
import logging
import os

import pytest

from diagnostic.application.api import score_diagnostic
from diagnostic.domain.schemas import (
    DimensionScoreInput,
    ExecutiveSummaryInput,
    QuestionInput,
    ResponseInput,
    validate_input,
)
from diagnostic.infrastructure.config import (
    LoggingConfig,
    get_settings,
    load_settings_from_file,
    override_settings,
    reset_settings,
)
from diagnostic.infrastructure.exceptions import (
    DiagnosticError,
    ExportError,
    InvalidResponseError,
    MultipleValidationError,
    ValidationError,
    create_user_friendly_error_message,
    log_error_details,
)
from diagnostic.infrastructure.logging import (
    LogContext,
    StructuredFormatter,
    clear_context,
    configure_logging,
    context_filter,
    get_logger,
    log_operation,
    set_context,
    setup_logging,
)
from scripts import run_server


class TestPydanticValidation:
    """Test input validation using Pydantic models."""

    def test_question_validation_success(self):
        result = validate_input(
            QuestionInput,
            {"id": "q1", "dimension": "Transformação", "dimension_order": 5, "reverse_scored": True},
        )

        assert result.success is True
        assert result.data is not None
        assert result.data["question_order"] == 0
        assert result.data["reverse_scored"] is True

    def test_question_to_domain(self):
        question = QuestionInput(id="q1", dimension="A", dimension_order=None).to_domain()
        assert question.dimension_order == 0
        assert question.reverse_scored is False

    def test_question_validation_failure(self):
        result = validate_input(QuestionInput, {"id": "", "dimension": "A"})

        assert result.success is False
        assert any("id" in error.field for error in result.errors)

    def test_response_range(self):
        assert validate_input(ResponseInput, {"question_id": "q1", "score": 5}).success
        result = validate_input(ResponseInput, {"question_id": "q1", "score": 0})
        assert result.success is False
        assert result.errors[0].field == "score"
        assert result.errors[0].value == 0

    def test_dimension_score_bounds(self):
        assert validate_input(DimensionScoreInput, {"dimension": "A", "score": 5}).success
        assert not validate_input(DimensionScoreInput, {"dimension": "A", "score": 5.5}).success
        assert not validate_input(
            DimensionScoreInput, {"dimension": "A", "score": 3, "percentage": 120}
        ).success

    def test_summary_needs_two_dimensions(self):
        result = validate_input(
            ExecutiveSummaryInput,
            {"participant_name": "Ana", "dimension_scores": [{"dimension": "A", "score": 3}]},
        )
        assert result.success is False
        assert result.errors[0].field == "dimension_scores"

    def test_input_sanitization(self):
        """Markup and control characters are stripped from free text."""
        result = validate_input(
            QuestionInput,
            {
                "id": "  q1  ",
                "dimension": "<b>Transformação</b>",
                "question_text": "<script>alert('xss')</script>Eu\x00 mudo",
            },
        )

        assert result.success is True
        data = result.data
        assert data["id"] == "q1"
        assert data["dimension"] == "Transformação"
        assert data["question_text"] == "Eu mudo"


class TestErrorHandling:
    """Test error handling and user-friendly messages."""

    def test_validation_error_creation(self):
        error = ValidationError("test_field", "Test error message", "invalid_value")

        assert error.field == "test_field"
        assert "Test error message" in str(error)
        assert error.user_message == "Invalid test field: Test error message"
        assert error.details == {"field": "test_field", "value": "invalid_value"}

    def test_multiple_validation_errors(self):
        error = MultipleValidationError(
            [ValidationError("a", "bad"), ValidationError("b", "worse", 3)]
        )
        assert len(error.validation_errors) == 2
        assert "a: Validation failed for field 'a': bad" in error.message
        assert error.details["errors"][1]["field"] == "b"
        assert error.details["errors"][1]["value"] == 3

    def test_invalid_response_error(self):
        error = InvalidResponseError("q7", 9)
        assert isinstance(error, DiagnosticError)
        assert error.details == {"question_id": "q7", "value": 9}
        assert "between 1-5" in error.message

    def test_user_friendly_error_messages(self):
        friendly_msg = create_user_friendly_error_message(
            ValidationError("participant_name", "cannot be empty")
        )
        assert friendly_msg == "Invalid participant name: cannot be empty"

        friendly_msg = create_user_friendly_error_message(ValueError("Some technical error"))
        assert "try again" in friendly_msg.lower()

        friendly_msg = create_user_friendly_error_message(RuntimeError("boom"))
        assert "unexpected" in friendly_msg.lower()

    def test_log_error_details(self):
        details = log_error_details(ExportError("disk full", export_format="xlsx"), {"op": "x"})
        assert details["error_type"] == "ExportError"
        assert details["context"] == {"op": "x"}
        assert details["error_details"] == {"export_format": "xlsx"}


class TestLogging:
    """Test the logging setup."""

    def test_logger_namespace(self):
        assert get_logger("test_module").name == "diagnostic.test_module"
        assert get_logger("diagnostic.web").name == "diagnostic.web"

    def test_logging_configuration(self, tmp_path):
        log_file = tmp_path / "logs" / "test.log"
        try:
            setup_logging(level="DEBUG", log_file=str(log_file), structured=True, enable_console=False)
            get_logger("test").info("Test message")

            line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
            entry = json.loads(line)
            assert entry["message"] == "Test message"
            assert entry["logger"] == "diagnostic.test"
            assert entry["timestamp"].endswith("Z")
        finally:
            configure_logging()

    def test_log_level_setting_is_applied(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        try:
            configure_logging(override_settings().logging)
            assert logging.getLogger("diagnostic").getEffectiveLevel() == logging.ERROR
        finally:
            monkeypatch.delenv("LOG_LEVEL")
            reset_settings()
            configure_logging()
        assert logging.getLogger("diagnostic").getEffectiveLevel() == logging.WARNING

    def test_log_file_setting_is_applied(self, monkeypatch, tmp_path):
        log_file = tmp_path / "settings.log"
        monkeypatch.setenv("LOG_FILE_PATH", str(log_file))
        try:
            configure_logging(override_settings().logging)
            get_logger("files").warning("written")
            entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
            assert entry["message"] == "written"
        finally:
            monkeypatch.delenv("LOG_FILE_PATH")
            reset_settings()
            configure_logging()

    def test_structured_formatter_includes_context(self):
        record = logging.LogRecord("diagnostic.x", logging.INFO, __file__, 1, "olá", None, None)
        record.participant = "Ana"
        record.unresolved_dimensions = ["Liderança"]

        entry = json.loads(StructuredFormatter().format(record))
        assert entry["message"] == "olá"
        assert entry["participant"] == "Ana"
        assert entry["unresolved_dimensions"] == ["Liderança"]

    def test_context_logging(self):
        clear_context()
        set_context(request_id="abc")
        assert context_filter.context["request_id"] == "abc"

        with LogContext(participant="Ana"):
            assert context_filter.context == {"request_id": "abc", "participant": "Ana"}
        assert "participant" not in context_filter.context

        clear_context()
        assert context_filter.context == {}

    def test_log_operation(self, diagnostic_logs):
        @log_operation("sample_operation")
        def sample(value):
            if value < 0:
                raise ValueError("negative")
            return value * 2

        assert sample(2) == 4
        with pytest.raises(ValueError):
            sample(-1)

        messages = [r.getMessage() for r in diagnostic_logs.records]
        assert any(m.startswith("Completed sample_operation") for m in messages)
        assert any(m == "Failed sample_operation: negative" for m in messages)


class TestConfiguration:
    """Test centralized configuration management."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.scoring.strict_responses is False
        assert settings.scoring.warn_on_unresolved_dimensions is True
        assert settings.security.max_questions == 500
        assert settings.app.title

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

    def test_settings_override(self):
        test_settings = override_settings(app_environment="testing", scoring_strict_responses=True)

        assert test_settings.app.environment == "testing"
        assert test_settings.is_testing()
        assert test_settings.scoring.strict_responses is True

    def test_list_override(self):
        settings = override_settings(security_cors_methods=["get", "post"])
        assert settings.security.cors_methods == ["GET", "POST"]

    def test_debug_not_allowed_in_production(self):
        override_settings(app_environment="production", app_debug=True)
        with pytest.raises(ValueError):
            get_settings().app

    def test_logging_level_follows_environment(self):
        assert override_settings(app_environment="production").logging.level == "WARNING"

    def test_logging_presets(self):
        config = get_settings().logging
        assert (config.level, config.file_path, config.console_enabled) == ("WARNING", None, False)

        config = override_settings(app_environment="development").logging
        assert (config.level, config.structured) == ("DEBUG", False)

    def test_explicit_logging_variables_win_over_presets(self):
        config = override_settings(app_environment="production", log_level="INFO").logging
        assert config.level == "INFO"
        assert config.file_path == "./logs/production.log"

    def test_logging_file_handler(self):
        config = LoggingConfig(file_path=None)
        assert config.get_file_handler_config() is None
        handler = LoggingConfig(file_path="./logs/x.log").get_file_handler_config()
        assert handler["filename"] == "./logs/x.log"

    def test_load_settings_from_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"scoring": {"strict_responses": True}}), encoding="utf-8")

        settings = load_settings_from_file(str(path))
        assert settings.scoring.strict_responses is True
        assert os.environ["SCORING_STRICT_RESPONSES"] == "True"

    def test_load_settings_rejects_unknown_format(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("scoring: {}", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings_from_file(str(path))
        with pytest.raises(FileNotFoundError):
            load_settings_from_file(str(tmp_path / "missing.json"))

    def test_environment_info(self):
        env_info = get_settings().get_environment_info()
        assert "environment" in env_info
        assert "version" in env_info
        assert env_info["scoring"]["strict_responses"] is False
        assert env_info["features"] == {"xlsx_export": True}


class TestIntegration:
    """Test the layers working together."""

    def test_strict_mode_errors_are_user_friendly(self):
        override_settings(scoring_strict_responses=True)
        with pytest.raises(InvalidResponseError) as exc_info:
            score_diagnostic([{"id": "a1", "dimension": "A"}], {"a1": 0})
        assert exc_info.value.value == 0
        assert create_user_friendly_error_message(exc_info.value).startswith("One of the answers")

    def test_server_parser_follows_settings(self):
        override_settings(app_environment="production", app_port=9000)
        args = run_server.build_parser().parse_args([])
        assert args.port == 9000
        assert args.reload is False
        assert run_server.build_parser().parse_args(["--reload"]).reload is True

    def test_server_main_runs_uvicorn(self, monkeypatch):
        calls = []
        monkeypatch.setattr(run_server.uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))

        run_server.main(["--host", "0.0.0.0", "--port", "8080", "--no-reload"])

        assert calls == [
            ((run_server.APP_PATH,), {"host": "0.0.0.0", "port": 8080, "reload": False})
        ]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Tests for report engine exceptions
"""
from core.exceptions import ArtifactWriteError, ConfigurationError, ReportEngineError, ValidationError


class TestReportEngineError:
    def test_defaults(self):
        error = ReportEngineError("Something broke")

        assert str(error) == "Something broke"
        assert error.error_code == "ReportEngineError"
        assert error.status_code == 500
        assert error.to_dict() == {"error": "ReportEngineError", "message": "Something broke", "details": {}}


class TestValidationError:
    def test_field_errors(self):
        error = ValidationError({"libraryPath": "Library path is required", "datasetNames": "At least one"})

        assert error.status_code == 400
        assert error.error_code == "VALIDATION_ERROR"
        assert error.message == "Validation failed"
        assert error.fields == ["libraryPath", "datasetNames"]
        assert error.to_dict()["details"] == {
            "errors": {"libraryPath": "Library path is required", "datasetNames": "At least one"}
        }

    def test_field_errors_are_copied(self):
        source = {"reportName": "Report name is required"}
        error = ValidationError(source)
        source.clear()

        assert error.fields == ["reportName"]

    def test_is_report_engine_error(self):
        assert isinstance(ValidationError({}), ReportEngineError)


class TestArtifactWriteError:
    def test_path_and_cause(self):
        error = ArtifactWriteError("reports/output/abc.pdf", "Permission denied")

        assert error.path == "reports/output/abc.pdf"
        assert error.cause == "Permission denied"
        assert error.message == "Failed to write artifact reports/output/abc.pdf: Permission denied"
        assert error.details == {"path": "reports/output/abc.pdf", "cause": "Permission denied"}
        assert error.status_code == 500


class TestConfigurationError:
    def test_setting_detail(self):
        error = ConfigurationError("Output directory missing", setting="output_dir")

        assert error.error_code == "CONFIGURATION_ERROR"
        assert error.details == {"setting": "output_dir"}

    def test_without_setting(self):
        assert ConfigurationError("Broken").details == {}

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from exception_audit.parser.extractor import ThrowPolicy


class Settings(BaseSettings):
    app_name: str = "exception-audit"

    # Non-construction throws: "strict" drops them, "inclusive" records them
    throw_policy: ThrowPolicy = ThrowPolicy.STRICT
    # None follows the policy: strict runs emit the catalogue, inclusive runs don't
    emit_catalogue: bool | None = None

    output_dir: Path = Path(".")
    report_file_name: str = "exception_analysis_report.html"
    catalogue_file_name: str = "unique_exception_texts.txt"
    # Jinja2 template for the HTML report; created with the default layout if missing
    report_template: Path | None = None

    source_extension: str = ".java"
    excluded_segments: frozenset[str] = frozenset({"target", "test"})
    group_by_relative_path: bool = False

    max_workers: int = 1
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="EXCEPTION_AUDIT_",
        extra="ignore",
    )

    @field_validator("max_workers")
    @classmethod
    def _at_least_one_worker(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_workers must be at least 1")
        return value

    @field_validator("source_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        return value if value.startswith(".") else f".{value}"

    @property
    def should_emit_catalogue(self) -> bool:
        if self.emit_catalogue is not None:
            return self.emit_catalogue
        return self.throw_policy is ThrowPolicy.STRICT


def get_settings(**overrides) -> Settings:
    """Build settings from the environment, applying non-None overrides."""
    return Settings(**{key: value for key, value in overrides.items() if value is not None})

"""
Configuration management using Pydantic Settings.

Loads analysis settings from (lowest to highest precedence):
- built-in defaults
- optional config/analysis.yaml
- environment variables prefixed with STUDENT_ANALYSIS_ (and .env)
- keyword arguments passed explicitly

Provides type-safe access to:
- Document shape (root, record, name element and attribute names)
- Default traversal strategy
- Missing-name policy shared by all strategies
"""

from pathlib import Path
from typing import Literal, Optional
import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from student_analysis.validators import validate_xml_name


def _find_config_file() -> Optional[Path]:
    """Locate config/analysis.yaml relative to project root, then cwd."""
    current_file = Path(__file__)
    project_root = current_file.parent.parent.parent  # src/student_analysis/config.py -> root
    config_path = project_root / 'config' / 'analysis.yaml'

    if not config_path.exists():
        config_path = Path('config/analysis.yaml')

    return config_path if config_path.exists() else None


class AnalysisSettings(BaseSettings):
    """
    Settings shared by every traversal strategy.

    Attributes:
        root_tag: Required name of the document root (None accepts any root)
        record_tag: Element name of one student record
        name_tag: Child element holding the student's name
        faculty_attribute: Record attribute matched against the faculty criterion
        department_attribute: Record attribute matched against the department criterion
        default_strategy: Strategy used when the caller does not name one
        missing_name: What a matching record without a name element yields:
            'empty' appends an empty string, 'skip' appends nothing
        huge_tree: Lift lxml's safety limits for very deep/large documents

    Example:
        >>> settings = AnalysisSettings(root_tag='University')
        >>> settings.record_tag
        'Student'
        >>> settings.record_path
        '/University/Student'
    """

    root_tag: Optional[str] = Field(
        default=None,
        description="Root element name; None accepts any root element"
    )
    record_tag: str = Field(
        default="Student",
        description="Element name of a student record"
    )
    name_tag: str = Field(
        default="Name",
        description="Child element holding the student's name"
    )
    faculty_attribute: str = Field(
        default="Faculty",
        description="Record attribute compared with the faculty criterion"
    )
    department_attribute: str = Field(
        default="Department",
        description="Record attribute compared with the department criterion"
    )
    default_strategy: str = Field(
        default="tree",
        description="Strategy name used when none is given"
    )
    missing_name: Literal['empty', 'skip'] = Field(
        default='empty',
        description="Result for a matching record that has no name element"
    )
    huge_tree: bool = Field(
        default=False,
        description="Disable lxml security limits for huge documents"
    )

    model_config = SettingsConfigDict(
        env_prefix='STUDENT_ANALYSIS_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: dict) -> dict:
        """
        Merge config/analysis.yaml beneath explicitly provided values.

        The YAML file is optional. Values already present in ``data``
        (keyword arguments, environment) always win over the file.
        """
        config_path = _find_config_file()
        if config_path is None:
            return data

        with open(config_path, 'r', encoding='utf-8') as f:
            yaml_data = yaml.safe_load(f) or {}

        if not isinstance(yaml_data, dict):
            raise ValueError(
                f"Config file {config_path} must contain a mapping, "
                f"got {type(yaml_data).__name__}"
            )

        return {**yaml_data, **(data or {})}

    @field_validator(
        'root_tag', 'record_tag', 'name_tag',
        'faculty_attribute', 'department_attribute'
    )
    @classmethod
    def validate_tag_names(cls, v: Optional[str]) -> Optional[str]:
        """Tag and attribute names are embedded in XPath, so keep them plain."""
        return validate_xml_name(v)

    @field_validator('default_strategy')
    @classmethod
    def normalize_strategy_name(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def record_path(self) -> str:
        """Absolute XPath of the record elements."""
        return f"/{self.root_tag or '*'}/{self.record_tag}"

    @property
    def skip_missing_names(self) -> bool:
        return self.missing_name == 'skip'


# Singleton pattern - loaded once, cached until reset
_settings: Optional[AnalysisSettings] = None


def get_settings() -> AnalysisSettings:
    """
    Get global settings instance (lazy-loaded singleton).

    Returns:
        Singleton AnalysisSettings instance

    Example:
        >>> settings = get_settings()
        >>> settings is get_settings()
        True
    """
    global _settings
    if _settings is None:
        _settings = AnalysisSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None

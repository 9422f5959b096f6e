"""
Run configuration: locked month, weekend days, locale and employees.
"""

import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.models import LockedMonth, PayrollEventType

logger = logging.getLogger(__name__)


class Employee(BaseModel):
    """Employee a payroll element can be recorded for."""
    id: str
    name: str
    position: str = ""
    department: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        """Accept unquoted numeric ids from YAML."""
        return str(value) if isinstance(value, int) else value

    def display_name(self) -> str:
        """Get display name."""
        return self.name


class AppConfig(BaseModel):
    """Application configuration."""
    locked_month: str
    weekend_days: List[int] = Field(default_factory=lambda: [5, 6])  # Saturday, Sunday
    locale: str = "fr"
    default_event_type: PayrollEventType = PayrollEventType.PAID_LEAVE
    employees: List[Employee] = Field(default_factory=list)

    @field_validator("locked_month")
    @classmethod
    def validate_locked_month(cls, value: str) -> str:
        """Ensure the locked month is a YYYY-MM string."""
        try:
            return str(LockedMonth.parse(value))
        except ValueError as exc:
            raise ValueError(f"locked_month must be formatted as YYYY-MM, got '{value}'") from exc

    @field_validator("weekend_days")
    @classmethod
    def validate_weekend_days(cls, value: List[int]) -> List[int]:
        """Reject weekday indexes outside Monday (0) to Sunday (6); drop repeats."""
        out_of_week = sorted({day for day in value if not 0 <= day <= 6})
        if out_of_week:
            raise ValueError(f"weekend_days must be between 0 and 6, got {out_of_week}")
        return list(dict.fromkeys(value))

    @field_validator("employees")
    @classmethod
    def validate_employees(cls, value: List[Employee]) -> List[Employee]:
        """Ensure employee ids are unique."""
        seen_ids: set[str] = set()
        for employee in value:
            if employee.id in seen_ids:
                raise ValueError(f"Duplicate employee id detected: {employee.id}")
            seen_ids.add(employee.id)
        return value

    def get_locked_month(self) -> LockedMonth:
        """Get the locked month as a domain object."""
        return LockedMonth.parse(self.locked_month)

    @classmethod
    def load(cls, config_path: Path, locked_month: Optional[str] = None) -> "AppConfig":
        """
        Build the configuration for one run.

        A ``locked_month`` given by the caller (command line or scenario)
        overrides the file's. Without a config file it is enough on its own:
        the remaining settings keep their defaults.

        Raises:
            FileNotFoundError: If the file is missing and no locked month is given
            ValueError: If the file or the locked month is invalid
        """
        if config_path.is_file():
            config = cls.from_yaml(config_path)
            if locked_month is None:
                return config
            return cls.model_validate({**config.model_dump(), "locked_month": locked_month})

        if locked_month is None:
            raise FileNotFoundError(
                f"No config file at {config_path} and no locked month given. "
                f"Copy config.example.yaml to config.yaml or pass --locked-month."
            )
        logger.info("No config file at %s, using defaults for %s", config_path, locked_month)
        return cls(locked_month=locked_month)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Parse a YAML config file; malformed YAML is reported as ValueError."""
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ValueError(f"{config_path} is not valid YAML: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"{config_path} must hold a mapping of settings, got {type(data).__name__}")
        return cls.model_validate(data)

    def find_employee(self, employee_id: str) -> Employee | None:
        """Find an employee by id."""
        for employee in self.employees:
            if employee.id == employee_id:
                return employee
        return None


CONFIG_FILE_NAME = "config.yaml"


def get_default_config_path() -> Path:
    """
    Return the first existing config.yaml from the working directory or the
    project checkout, falling back to the working directory's path.
    """
    candidates = [Path.cwd() / CONFIG_FILE_NAME, Path(__file__).resolve().parent.parent / CONFIG_FILE_NAME]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return candidates[0]

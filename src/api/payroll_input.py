import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from models.errors import PayrollInputError
from models.money import Money, Hours, Rate
from models.payroll import PayrollConfig, AttendanceRecord, SpecialDeductions
from utils.validators import parse_decimal, validate_non_negative

PayrollInput = Tuple[PayrollConfig, AttendanceRecord, SpecialDeductions]


class PayrollInputLoader:
    """Build typed payroll inputs from dicts or JSON files"""

    # Amounts in fen, 8000 yuan monthly salary
    SAMPLE_INPUT = {
        "config": {
            "base_salary": "800000",
            "full_month_hours": "174",
            "pension_rate": "0.08",
            "medical_rate": "0.20",
            "unemployment_rate": "0.05",
            "housing_fund_rate": "0.07",
            "overtime_weekday_rate": "1.0",
            "overtime_weekend_rate": "1.2",
            "overtime_holiday_rate": "3.0"
        },
        "attendance": {
            "work_hours": "174",
            "overtime_weekday": "1",
            "overtime_weekend": "1",
            "overtime_holiday": "0",
            "absence_hours": "0"
        },
        "deductions": {
            "children_education": "0",
            "continuing_education": "0",
            "housing_loan_interest": "10000",
            "housing_rent": "0",
            "support_elderly": "20000"
        }
    }

    CONFIG_FIELDS = {
        "base_salary": Money,
        "full_month_hours": Hours,
        "pension_rate": Rate,
        "medical_rate": Rate,
        "unemployment_rate": Rate,
        "housing_fund_rate": Rate,
        "overtime_weekday_rate": Rate,
        "overtime_weekend_rate": Rate,
        "overtime_holiday_rate": Rate,
    }

    ATTENDANCE_FIELDS = (
        "work_hours", "overtime_weekday", "overtime_weekend", "overtime_holiday", "absence_hours"
    )

    DEDUCTION_FIELDS = (
        "children_education", "continuing_education", "housing_loan_interest",
        "housing_rent", "support_elderly"
    )

    def sample(self) -> PayrollInput:
        """Inputs for the built-in sample employee"""
        return self.from_dict(self.SAMPLE_INPUT)

    def load_file(self, path: Union[str, Path]) -> PayrollInput:
        """Load inputs from a JSON file"""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f, parse_float=Decimal)
        except FileNotFoundError:
            raise PayrollInputError(f"Input file not found: {path}")
        except json.JSONDecodeError as e:
            raise PayrollInputError(f"Invalid JSON in {path}: {e}")
        return self.from_dict(data)

    def from_dict(self, data: Dict[str, Any]) -> PayrollInput:
        """Build (config, attendance, deductions) from a nested dict"""
        if not isinstance(data, dict):
            raise PayrollInputError("Payroll input must be a JSON object")

        config = self._parse_config(self._section(data, "config", required=True))
        attendance = self._parse_attendance(self._section(data, "attendance"))
        deductions = self._parse_deductions(self._section(data, "deductions"))

        return config, attendance, deductions

    def _section(self, data: Dict[str, Any], name: str, required: bool = False) -> Dict[str, Any]:
        section = data.get(name)
        if section is None:
            if required:
                raise PayrollInputError(f"Missing '{name}' section")
            return {}
        if not isinstance(section, dict):
            raise PayrollInputError(f"'{name}' must be an object")
        return section

    def _number(self, section: Dict[str, Any], key: str, prefix: str, required: bool) -> Decimal:
        field_name = f"{prefix}.{key}"
        if key not in section:
            if required:
                raise PayrollInputError(f"Missing required field '{field_name}'")
            return Decimal('0')
        value = parse_decimal(section[key], field_name)
        return validate_non_negative(value, field_name)

    def _parse_config(self, section: Dict[str, Any]) -> PayrollConfig:
        values = {
            key: value_type(self._number(section, key, "config", required=True))
            for key, value_type in self.CONFIG_FIELDS.items()
        }
        return PayrollConfig(**values)

    def _parse_attendance(self, section: Dict[str, Any]) -> AttendanceRecord:
        values = {
            key: Hours(self._number(section, key, "attendance", required=False))
            for key in self.ATTENDANCE_FIELDS
        }
        return AttendanceRecord(**values)

    def _parse_deductions(self, section: Dict[str, Any]) -> SpecialDeductions:
        values = {
            key: Money(self._number(section, key, "deductions", required=False))
            for key in self.DEDUCTION_FIELDS
        }
        return SpecialDeductions(**values)

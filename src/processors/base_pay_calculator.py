from models.money import Money, Hours
from models.payroll import PayrollConfig, AttendanceRecord


class BasePayCalculator:
    """Calculate absence-adjusted base pay and overtime pay"""

    @staticmethod
    def hourly_rate(config: PayrollConfig) -> Money:
        """Base salary per standard hour, not rounded"""
        return config.base_salary / config.full_month_hours

    def calculate_base_pay(self, config: PayrollConfig, attendance: AttendanceRecord) -> Money:
        """Pay for hours worked minus the absence deduction"""
        hourly = self.hourly_rate(config)

        normal_pay = hourly * attendance.work_hours
        absence_deduction = hourly * attendance.absence_hours

        return (normal_pay - absence_deduction).round2()

    def calculate_overtime_pay(self, config: PayrollConfig, attendance: AttendanceRecord) -> Money:
        """Sum of hourly rate x hours x multiplier over the overtime categories"""
        hourly = self.hourly_rate(config)

        categories = [
            (attendance.overtime_weekday, config.overtime_weekday_rate),
            (attendance.overtime_weekend, config.overtime_weekend_rate),
            (attendance.overtime_holiday, config.overtime_holiday_rate),
        ]

        total = Money.zero()
        for hours, multiplier in categories:
            if hours.is_zero():
                continue
            total = total + hourly * hours * multiplier

        # Only the sum is rounded
        return total.round2()

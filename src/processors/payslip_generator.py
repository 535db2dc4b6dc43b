import openpyxl
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill
from pathlib import Path
from datetime import date
from typing import Optional
from models.money import Money
from models.payroll import PayrollConfig, PayrollResult
from utils.formatters import format_currency, format_percentage
from config.settings import OUTPUT_DIR, CURRENCY_SYMBOL


class PayslipGenerator:
    """Generate salary detail Excel files"""

    def __init__(self, output_dir: Optional[Path] = None, symbol: str = CURRENCY_SYMBOL):
        self.output_dir = Path(output_dir) if output_dir else OUTPUT_DIR / "payslips"
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.symbol = symbol

    def generate(self, result: PayrollResult, config: PayrollConfig,
                 employee_name: str = "Employee", period: Optional[date] = None) -> str:
        """Generate payslip Excel file"""
        period = period or date.today()

        # Create workbook
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Salary Details"

        # Set column widths
        ws.column_dimensions['A'].width = 28
        ws.column_dimensions['B'].width = 20
        ws.column_dimensions['C'].width = 20

        # Define styles
        header_font = Font(bold=True, size=12)
        bold_font = Font(bold=True)
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )
        header_fill = PatternFill(start_color="B4C7E7", end_color="B4C7E7", fill_type="solid")

        # Header section
        row = 1
        ws.merge_cells(f'A{row}:C{row}')
        ws[f'A{row}'] = f"SALARY DETAILS - {employee_name}"
        ws[f'A{row}'].font = header_font
        ws[f'A{row}'].alignment = Alignment(horizontal='center')

        row = 2
        ws[f'A{row}'] = "Pay period"
        ws[f'B{row}'] = period.strftime('%Y-%m')

        # Item table
        row = 4
        for col, header in zip('ABC', ["Item", "Amount", "Minor units"]):
            cell = ws[f'{col}{row}']
            cell.value = header
            cell.font = bold_font
            cell.fill = header_fill
            cell.border = thin_border

        items = [
            ("Base salary", config.base_salary),
            ("Base pay", result.base_pay),
            ("Overtime pay", result.overtime_pay),
            ("Gross salary", result.gross),
            ("Social insurance", result.social_insurance),
            ("Housing fund", result.housing_fund),
            ("Insurance and fund", result.insurance_and_fund),
            ("Taxable income", result.taxable_income),
            ("Income tax", result.income_tax),
        ]

        row = 5
        for label, amount in items:
            self._write_amount(ws, row, label, amount, thin_border)
            row += 1

        # Net payment
        self._write_amount(ws, row, "Net salary", result.net, thin_border)
        ws[f'A{row}'].font = Font(bold=True, size=14)
        ws[f'B{row}'].font = Font(bold=True, size=14)
        row += 2

        # Contribution rates
        ws[f'A{row}'] = "Contribution rates"
        ws[f'A{row}'].font = bold_font
        row += 1

        rates = [
            ("Pension", config.pension_rate),
            ("Medical", config.medical_rate),
            ("Unemployment", config.unemployment_rate),
            ("Housing fund", config.housing_fund_rate),
        ]
        for label, rate in rates:
            ws[f'A{row}'] = label
            ws[f'B{row}'] = format_percentage(rate)
            row += 1

        # Generate filename
        safe_name = "".join(c if c.isalnum() else "_" for c in employee_name)
        filename = f"{safe_name}_{period.year}_{period.month:02d}_payslip.xlsx"
        filepath = self.output_dir / filename

        # Save workbook
        wb.save(filepath)

        return str(filepath)

    def _write_amount(self, ws, row: int, label: str, amount: Money, border: Border):
        ws[f'A{row}'] = label
        ws[f'B{row}'] = format_currency(amount, self.symbol)
        ws[f'C{row}'] = float(amount.amount)
        ws[f'C{row}'].number_format = '#,##0.00'
        for col in 'ABC':
            ws[f'{col}{row}'].border = border

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import LOG_LEVEL, CURRENCY_SYMBOL, TAX_TABLE
from api.payroll_input import PayrollInputLoader
from models.errors import PayrollError
from models.tax_brackets import get_tax_brackets
from processors.net_salary_calculator import NetSalaryCalculator
from processors.payslip_generator import PayslipGenerator
from utils.formatters import format_salary_report

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Calculate net salary for one pay period")
    parser.add_argument("--input", "-i", help="JSON file with config, attendance and deductions "
                                              "(defaults to the built-in sample)")
    parser.add_argument("--tax-table", default=TAX_TABLE, help="statutory or reference")
    parser.add_argument("--name", default="Employee", help="Employee name for the report")
    parser.add_argument("--payslip", action="store_true", help="Also write an Excel payslip")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for the salary calculator"""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    args = parse_args(argv)

    loader = PayrollInputLoader()
    try:
        if args.input:
            logger.info("Loading payroll input from %s", args.input)
            config, attendance, deductions = loader.load_file(args.input)
        else:
            logger.info("No input file given, using sample employee")
            config, attendance, deductions = loader.sample()

        brackets = get_tax_brackets(args.tax_table)
        result = NetSalaryCalculator(brackets).calculate(config, attendance, deductions)
    except (PayrollError, ValueError) as e:
        logger.error("Salary calculation failed: %s", e)
        return 1

    print(format_salary_report(result, config, symbol=CURRENCY_SYMBOL,
                               title=f"Salary Details - {args.name}"))

    if args.payslip:
        filepath = PayslipGenerator().generate(result, config, employee_name=args.name)
        logger.info("Payslip written to %s", filepath)

    return 0


if __name__ == "__main__":
    sys.exit(main())

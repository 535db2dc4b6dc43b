from flask import Flask, request, jsonify, send_file
from pathlib import Path
import logging
import sys

sys.path.insert(0, str(Path(__file__).parent / 'src'))

from api.payroll_input import PayrollInputLoader
from models.errors import PayrollError, PayrollInputError
from models.tax_brackets import get_tax_brackets
from processors.net_salary_calculator import NetSalaryCalculator
from processors.payslip_generator import PayslipGenerator
from utils.formatters import format_currency, format_percentage
from config.settings import SECRET_KEY, DEBUG, PORT, LOG_LEVEL, CURRENCY_SYMBOL, TAX_TABLE

app = Flask(__name__)
app.config['SECRET_KEY'] = SECRET_KEY
app.config['DEBUG'] = DEBUG
app.config['TAX_TABLE'] = TAX_TABLE

logger = logging.getLogger(__name__)


def calculate_from_request(data):
    """Run the calculation for a request body"""
    if data is None:
        raise PayrollInputError("Request body must be JSON")

    loader = PayrollInputLoader()
    config, attendance, deductions = loader.from_dict(data)

    table_name = data.get('tax_table', app.config['TAX_TABLE'])
    try:
        brackets = get_tax_brackets(str(table_name))
    except ValueError as e:
        raise PayrollInputError(str(e))

    result = NetSalaryCalculator(brackets).calculate(config, attendance, deductions)
    return config, result


def error_response(e):
    status = 400 if isinstance(e, PayrollInputError) else 422
    logger.warning("Rejected payroll request: %s", e)
    return jsonify({
        'success': False,
        'message': str(e)
    }), status


# ============================================================================
# API Endpoints
# ============================================================================

@app.route('/api/sample')
def get_sample():
    """Sample payroll input"""
    return jsonify(PayrollInputLoader.SAMPLE_INPUT)


@app.route('/api/tax-brackets')
def get_brackets():
    """List the configured tax bracket table"""
    name = request.args.get('table', app.config['TAX_TABLE'])
    try:
        brackets = get_tax_brackets(name)
    except ValueError as e:
        return jsonify({'success': False, 'message': str(e)}), 400

    return jsonify({
        'success': True,
        'table': name,
        'brackets': [
            {
                'threshold': str(b.threshold),
                'rate': str(b.rate),
                'rate_percent': format_percentage(b.rate),
                'deduction': str(b.deduction)
            }
            for b in brackets
        ]
    })


@app.route('/api/calculate', methods=['POST'])
def calculate():
    """Calculate net salary"""
    try:
        config, result = calculate_from_request(request.get_json(silent=True))
    except PayrollError as e:
        return error_response(e)

    return jsonify({
        'success': True,
        'result': result.to_dict(),
        'formatted': {
            'base_salary': format_currency(config.base_salary, CURRENCY_SYMBOL),
            'overtime_pay': format_currency(result.overtime_pay, CURRENCY_SYMBOL),
            'gross': format_currency(result.gross, CURRENCY_SYMBOL),
            'insurance_and_fund': format_currency(result.insurance_and_fund, CURRENCY_SYMBOL),
            'income_tax': format_currency(result.income_tax, CURRENCY_SYMBOL),
            'net': format_currency(result.net, CURRENCY_SYMBOL)
        }
    })


@app.route('/api/payslip', methods=['POST'])
def download_payslip():
    """Generate and download an Excel payslip"""
    data = request.get_json(silent=True)
    try:
        config, result = calculate_from_request(data)
    except PayrollError as e:
        return error_response(e)

    name = str(data.get('employee_name', 'Employee'))
    filepath = PayslipGenerator().generate(result, config, employee_name=name)

    return send_file(filepath, as_attachment=True, download_name=Path(filepath).name)


if __name__ == '__main__':
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    app.run(host='0.0.0.0', port=PORT, debug=DEBUG)

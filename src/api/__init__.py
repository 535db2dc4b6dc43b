from .payroll_input import PayrollInputLoader

__all__ = [
    'PayrollInputLoader'
]

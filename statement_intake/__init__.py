"""Statement intake: file selection and wizard state for bank statement imports."""

__version__ = "0.1.0"

"""
Bank Account

A minimal bank-account value object with an explicit export table for
host runtimes that construct accounts and call their methods by name.
"""

from .account import DEFAULT_BALANCE, BankAccount, InsufficientFundsError
from .logging_config import configure_logging
from .module import EXPORTS, ClassExport, ModuleExport

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_BALANCE",
    "BankAccount",
    "InsufficientFundsError",
    "EXPORTS",
    "ClassExport",
    "ModuleExport",
    "configure_logging",
]

"""
Account Balance Module

Holds a single integer balance with deposit, withdraw and a read accessor.
Only withdrawals are checked: construction and deposits accept any integer,
including negative values.
"""

from typing import Optional

from .logging_config import get_logger, log_action


DEFAULT_BALANCE = 250


class InsufficientFundsError(ValueError):
    """Raised when a withdrawal exceeds the current balance"""
    
    def __init__(self, balance: int, amount: int):
        self.balance = balance
        self.amount = amount
        super().__init__(
            f"Current balance is {balance} so we cannot withdraw {amount} "
            f"without going negative."
        )
    
    def __reduce__(self):
        return (self.__class__, (self.balance, self.amount))


class BankAccount:
    """
    Bank account holding one integer balance
    
    ``BankAccount()`` starts from ``DEFAULT_BALANCE``; ``BankAccount(n)`` starts
    from ``n`` as given.
    """
    
    def __init__(self, starting_balance: Optional[int] = None):
        if starting_balance is None:
            starting_balance = DEFAULT_BALANCE
        self._current_balance = starting_balance
        self.logger = get_logger("bank_account.account")
    
    def deposit(self, amount: int) -> None:
        """Add amount to the balance"""
        self._current_balance += amount
        log_action(
            self.logger, "debug", "Deposit applied",
            action="deposit", resource="account",
            extra={"amount": amount, "balance": self._current_balance}
        )
    
    def withdraw(self, amount: int) -> None:
        """
        Subtract amount from the balance
        
        Args:
            amount: Amount to withdraw
            
        Raises:
            InsufficientFundsError: If amount exceeds the current balance.
                The balance is left unchanged.
        """
        if self._current_balance >= amount:
            self._current_balance -= amount
            log_action(
                self.logger, "debug", "Withdrawal applied",
                action="withdraw", resource="account",
                extra={"amount": amount, "balance": self._current_balance}
            )
        else:
            log_action(
                self.logger, "warning", "Withdrawal rejected: insufficient funds",
                action="withdraw", resource="account",
                extra={"amount": amount, "balance": self._current_balance}
            )
            raise InsufficientFundsError(self._current_balance, amount)
    
    def get_current_balance(self) -> int:
        """Get current balance"""
        return self._current_balance
    
    @property
    def current_balance(self) -> int:
        return self._current_balance
    
    def __repr__(self) -> str:
        return f"BankAccount(current_balance={self._current_balance})"

"""
Ledger service: customers and their statements.

This service enforces the ledger rules:
1. A customer is addressed by a unique cpf
2. Statement entries are append-only
3. A withdrawal never takes the balance below zero

The balance is never stored. It is always folded from the
statement, in order, by calculate_balance().
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from finapi.exceptions import CustomerNotFound, DuplicateCustomer, InsufficientFunds
from finapi.models.customer import Customer
from finapi.models.statement_entry import StatementEntry
from finapi.models.enums import EntryType
from finapi.schemas.customer import AccountCreate, AccountUpdate
from finapi.schemas.statement import DepositRequest, WithdrawRequest

logger = logging.getLogger(__name__)


def calculate_balance(statement: Iterable[StatementEntry]) -> Decimal:
    """
    Fold a statement into a balance.

    Starts at zero and walks the entries in order: credits
    add their amount, debits subtract it.
    """
    balance = Decimal("0")
    for entry in statement:
        if entry.entry_type == EntryType.CREDIT:
            balance += entry.amount
        else:
            balance -= entry.amount
    return balance


class LedgerService:
    """
    All ledger operations pass through this service.

    The service takes a database session as a constructor
    argument. The caller controls the transaction boundary
    and decides when to commit or rollback.
    """

    def __init__(self, db: Session):
        self.db = db

    # --- Customers ---

    def get_customer_by_cpf(self, cpf: str | None) -> Customer:
        """
        Resolve a customer by exact cpf match.

        Raises CustomerNotFound when no customer matches,
        including when no cpf was supplied at all.
        """
        customer = None
        if cpf is not None:
            customer = self.db.execute(
                select(Customer).where(Customer.cpf == cpf)
            ).scalar_one_or_none()

        if not customer:
            logger.warning("Lookup for unknown cpf %r", cpf)
            raise CustomerNotFound()
        return customer

    def create_account(self, request: AccountCreate) -> Customer:
        """
        Register a new customer with an empty statement.

        Raises DuplicateCustomer if the cpf is already taken.
        """
        existing = self.db.execute(
            select(Customer).where(Customer.cpf == request.cpf)
        ).scalar_one_or_none()

        if existing:
            raise DuplicateCustomer()

        customer = Customer(cpf=request.cpf, name=request.name)
        self.db.add(customer)
        self.db.flush()
        logger.info("Created customer %s for cpf %s", customer.external_id, customer.cpf)
        return customer

    def rename_account(self, customer: Customer, request: AccountUpdate) -> Customer:
        """Change the customer's name. The statement is untouched."""
        customer.name = request.name
        self.db.flush()
        logger.info("Renamed customer %s", customer.external_id)
        return customer

    def delete_account(self, customer: Customer) -> list[Customer]:
        """
        Remove exactly this customer, statement included.

        Returns the customers that remain.
        """
        external_id = customer.external_id
        self.db.delete(customer)
        self.db.flush()
        logger.info("Deleted customer %s", external_id)
        return self.list_customers()

    def list_customers(self) -> list[Customer]:
        """Return every customer in creation order."""
        customers = self.db.execute(
            select(Customer).order_by(Customer.id)
        ).scalars().all()
        return list(customers)

    # --- Statement ---

    def deposit(self, customer: Customer, request: DepositRequest) -> StatementEntry:
        """Append a credit entry stamped with the current time."""
        entry = StatementEntry(
            entry_type=EntryType.CREDIT,
            amount=request.amount,
            description=request.description,
            created_at=datetime.now(),
        )
        customer.statement.append(entry)
        self.db.flush()
        logger.info("Deposit of %s to customer %s", request.amount, customer.external_id)
        return entry

    def withdraw(self, customer: Customer, request: WithdrawRequest) -> StatementEntry:
        """
        Append a debit entry if the balance covers it.

        The caller must hold the ledger lock across this call and
        its commit, so the balance cannot change between the check
        and the append.
        """
        balance = calculate_balance(customer.statement)
        if balance < request.amount:
            logger.warning(
                "Rejected withdrawal of %s from customer %s: balance is %s",
                request.amount, customer.external_id, balance,
            )
            raise InsufficientFunds()

        entry = StatementEntry(
            entry_type=EntryType.DEBIT,
            amount=request.amount,
            created_at=datetime.now(),
        )
        customer.statement.append(entry)
        self.db.flush()
        logger.info("Withdrawal of %s from customer %s", request.amount, customer.external_id)
        return entry

    def get_statement(self, customer: Customer) -> list[StatementEntry]:
        """Return the full statement in insertion order."""
        return list(customer.statement)

    def get_statement_by_date(
        self, customer: Customer, day: date
    ) -> list[StatementEntry]:
        """
        Return the entries created on the given calendar day.

        Only the date components of created_at are compared;
        the time of day is ignored. Statement order is kept.
        """
        return [
            entry for entry in customer.statement
            if entry.created_at.date() == day
        ]

    def get_balance(self, customer: Customer) -> Decimal:
        return calculate_balance(customer.statement)

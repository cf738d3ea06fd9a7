"""Plain-text account statements."""

from decimal import Decimal

from tabulate import tabulate

DATE_FORMAT = "%d-%m-%Y %H:%M:%S"


def format_amount(amount: Decimal) -> str:
    return "{:,.2f}".format(amount)


def render_statement(account) -> str:
    """
    Render an account as a human-readable statement.

    The first line names the account type, followed by one row per
    transaction (oldest first) and the derived balance.

    Args:
        account: Any account exposing ``account_type``, ``transactions`` and ``balance``

    Returns:
        The statement text
    """
    lines = [f"{account.account_type} Account"]

    rows = [
        [txn.timestamp.strftime(DATE_FORMAT), txn.kind, format_amount(txn.amount)]
        for txn in account.transactions
    ]
    if rows:
        # Amounts are pre-formatted; keep tabulate from reparsing them as floats
        lines.append(
            tabulate(
                rows,
                headers=["Date", "Type", "Amount"],
                stralign="right",
                disable_numparse=True,
            )
        )

    lines.append(f"Total {format_amount(account.balance)}")
    return "\n".join(lines)

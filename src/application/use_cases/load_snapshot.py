"""Load the people and transactions a computation works on."""

from concurrent.futures import ThreadPoolExecutor

from src.application.ports.finance_api import FinanceApiPort, FinanceSnapshot


def load_finance_snapshot(api: FinanceApiPort) -> FinanceSnapshot:
    """Fetch people and transactions concurrently and join both.

    Errors raised by either fetch propagate to the caller.
    """
    with ThreadPoolExecutor(max_workers=2) as executor:
        people_future = executor.submit(api.fetch_people)
        transactions_future = executor.submit(api.fetch_transactions)
        people = people_future.result()
        transactions = transactions_future.result()
    return FinanceSnapshot(people=people, transactions=transactions)


__all__ = ["load_finance_snapshot"]

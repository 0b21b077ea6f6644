"""
Debt simplification.

A Transaction (source, destination, weight) records that source advanced
weight to destination, so destination ends up owing it. Net balances are
source -= weight, destination += weight: a positive balance means the party
received more than it gave and has to pay that amount back.

simplify() settles the ledger greedily: the party with the largest positive
balance pays the party with the most negative one, the smaller of the two
magnitudes, until every balance is zero. Each settlement zeroes at least one
party, so n non-zero parties need at most n - 1 settlements. The greedy
pairing is not guaranteed to reach the global minimum number of transfers
(that problem is NP-hard) but is optimal on small ledgers.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Hashable, List, Sequence, Tuple
import heapq
import logging
import math
import numbers


logger = logging.getLogger(__name__)

# Balances within this fraction of the ledger volume are treated as settled
REL_TOLERANCE = 1e-12

Party = Hashable


@dataclass(frozen=True)
class Transaction:
    source: Party
    destination: Party
    weight: float


@dataclass(frozen=True)
class Settlement:
    """Payment of weight from source to destination."""
    source: Party
    destination: Party
    weight: float

    def as_tuple(self) -> Tuple[Party, Party, float]:
        return (self.source, self.destination, self.weight)


class Splitwise:
    """
    Append-only transaction ledger producing settlement lists.

    Party names must be hashable and mutually orderable; ties between equal
    balances are broken by name.
    """

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []

    def add_transaction(self, source: Party, destination: Party, weight: float) -> None:
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            raise ValueError(f"transaction weight must be a number, got {weight!r}")
        if not math.isfinite(weight) or weight <= 0:
            raise ValueError(f"transaction weight must be positive and finite, got {weight}")
        self._transactions.append(Transaction(source, destination, float(weight)))

    @property
    def transactions(self) -> Sequence[Transaction]:
        return tuple(self._transactions)

    def clear(self) -> None:
        self._transactions.clear()

    def tolerance(self) -> float:
        """Largest magnitude still treated as zero, scaled to the ledger volume."""
        return REL_TOLERANCE * sum(tx.weight for tx in self._transactions)

    def balances(self) -> Dict[Party, float]:
        """Net balance per party, including parties whose balance nets to zero."""
        balance: Dict[Party, float] = defaultdict(float)
        for tx in self._transactions:
            balance[tx.source] -= tx.weight
            balance[tx.destination] += tx.weight
        return dict(balance)

    def simplify(self) -> List[Settlement]:
        """
        Greedy extremal pairing of the current net balances.

        Repeatedly pairs the largest positive balance (payer) with the most
        negative one (payee); equal magnitudes go to the smaller name first.
        """
        # Max-heaps of (-magnitude, name); popping gives the largest magnitude,
        # then the smallest name.
        payers: List[Tuple[float, Party]] = []
        payees: List[Tuple[float, Party]] = []
        tol = self.tolerance()
        for party, amount in self.balances().items():
            if amount > tol:
                payers.append((-amount, party))
            elif amount < -tol:
                payees.append((amount, party))
        heapq.heapify(payers)
        heapq.heapify(payees)

        settlements: List[Settlement] = []
        while payers and payees:
            owed, payer = heapq.heappop(payers)
            due, payee = heapq.heappop(payees)
            owed, due = -owed, -due
            amount = min(owed, due)
            settlements.append(Settlement(payer, payee, amount))

            if owed - amount > tol:
                heapq.heappush(payers, (-(owed - amount), payer))
            if due - amount > tol:
                heapq.heappush(payees, (-(due - amount), payee))

        logger.debug(
            "simplified %d transactions into %d settlements",
            len(self._transactions),
            len(settlements),
        )
        return settlements

    def net_pairs(self) -> List[Settlement]:
        """
        Net transactions per unordered pair of parties, without rerouting.

        Each pair with a non-zero net produces one settlement from the party
        that received more to the party that gave more. Output is sorted by
        the pair's names.
        """
        tol = self.tolerance()
        net: Dict[Tuple[Party, Party], float] = defaultdict(float)
        for tx in self._transactions:
            if tx.source == tx.destination:
                continue
            low, high = sorted((tx.source, tx.destination))
            # Positive means high received from low on balance
            net[(low, high)] += tx.weight if tx.source == low else -tx.weight

        settlements: List[Settlement] = []
        for (low, high), amount in sorted(net.items()):
            if amount > tol:
                settlements.append(Settlement(high, low, amount))
            elif amount < -tol:
                settlements.append(Settlement(low, high, -amount))
        return settlements

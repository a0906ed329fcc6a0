"""Scope resolution - which accounts (and so which records) are visible for an institution filter"""

from typing import Iterable, List, Optional, Set

from awareness_engine.domain.models import Account, Institution, Subscription, Transaction


def resolve_visible_account_ids(
    institutions: List[Institution],
    accounts: List[Account],
    selected_institution_id: Optional[str],
) -> Set[str]:
    """
    Compute the set of visible account ids.

    None selects every account. Otherwise only accounts held at the selected
    institution are visible; an unknown institution id yields an empty set.
    """
    if selected_institution_id is None:
        return {a.id for a in accounts}

    known_institutions = {i.id for i in institutions}
    if selected_institution_id not in known_institutions:
        return set()

    return {a.id for a in accounts if a.institution_id == selected_institution_id}


def visible_accounts(accounts: Iterable[Account], visible_ids: Set[str]) -> List[Account]:
    return [a for a in accounts if a.id in visible_ids]


def scope_transactions(transactions: Iterable[Transaction], visible_ids: Set[str]) -> List[Transaction]:
    """Transactions on visible accounts; orphans (unknown account ids) drop out"""
    return [t for t in transactions if t.account_id in visible_ids]


def scope_subscriptions(subscriptions: Iterable[Subscription], visible_ids: Set[str]) -> List[Subscription]:
    return [s for s in subscriptions if s.account_id in visible_ids]

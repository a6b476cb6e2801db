"""Make-up class ("recovery") balances.

Every justified absence owes the person one make-up class; every one-time
attendance consumes one. Balances are global across sessions and dates.
"""

from studio.domain.models import StudioSnapshot


def recovery_balances(snapshot: StudioSnapshot) -> dict[str, int]:
    """Return the make-up balance of every active person.

    Ids of inactive or unknown people are ignored. Balances are not clamped.
    """
    balances = {person.id: 0 for person in snapshot.active_people}
    for record in snapshot.attendance:
        for person_id in record.justified_absence_ids:
            if person_id in balances:
                balances[person_id] += 1
        for person_id in record.one_time_attendees:
            if person_id in balances:
                balances[person_id] -= 1
    return balances


def pending_recovery_count(snapshot: StudioSnapshot) -> int:
    return sum(1 for balance in recovery_balances(snapshot).values() if balance > 0)

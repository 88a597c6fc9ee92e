"""
Herd lifecycle and parentage rules.

Status state machine:
    active -> sold | dead
    sold, dead: terminal

Parentage: walking up the ancestry from a proposed parent must never reach
the animal being saved. The walk is breadth-first, one query per generation,
bounded by ANCESTRY_MAX_DEPTH and never revisiting an animal.
"""

import logging
from typing import Dict, List

from django.conf import settings
from django.db.models import Count, Q

from .models import Animal, Pen

logger = logging.getLogger(__name__)


class StatusTransitionError(Exception):
    """Raised when an invalid status transition is attempted."""
    pass


ANIMAL_STATUS_TRANSITIONS = {
    'active': ['sold', 'dead'],
    'sold': [],  # Terminal state
    'dead': [],  # Terminal state
}


def validate_status_transition(current_status: str, new_status: str,
                               transitions: Dict[str, List[str]] = ANIMAL_STATUS_TRANSITIONS,
                               resource_type: str = 'animal') -> bool:
    """
    Validate that a status transition is allowed.

    Raises:
        StatusTransitionError if transition is invalid
    """
    if current_status == new_status:
        return True

    valid_transitions = transitions.get(current_status, [])

    if new_status not in valid_transitions:
        raise StatusTransitionError(
            f"Invalid {resource_type} status transition: {current_status} -> {new_status}. "
            f"Valid transitions: {valid_transitions}"
        )

    return True


def transition_status(animal: Animal, new_status: str, exit_date=None) -> Animal:
    """
    Move an animal to a new lifecycle status and stamp its exit date.

    Callers that need the change to be atomic with another write must call
    this inside their own transaction with the animal row locked.
    """
    validate_status_transition(animal.status, new_status)

    if new_status == animal.status:
        return animal

    animal.status = new_status
    animal.exit_date = exit_date
    animal.save(update_fields=['status', 'exit_date', 'updated_at'])

    logger.info(f"Animal {animal.tag} moved to {new_status} (exit {exit_date})")
    return animal


def ancestry_contains(parent: Animal, animal_id, max_depth: int = None) -> bool:
    """Return True if ``animal_id`` appears in ``parent`` or any of its ancestors."""
    if max_depth is None:
        max_depth = settings.ANCESTRY_MAX_DEPTH

    visited = set()
    frontier = {parent.pk}
    depth = 0

    while frontier and depth <= max_depth:
        if animal_id in frontier:
            return True
        visited |= frontier

        next_frontier = set()
        for father_id, mother_id in Animal.objects.filter(
            pk__in=frontier
        ).values_list('father_id', 'mother_id'):
            next_frontier.update(pk for pk in (father_id, mother_id) if pk is not None)

        frontier = next_frontier - visited
        depth += 1

    if frontier:
        logger.warning(
            f"Ancestry walk from {parent.tag} stopped at depth {max_depth}"
        )
    return False


def pens_with_occupancy(queryset=None):
    """Annotate pens with the count of active animals assigned to them."""
    if queryset is None:
        queryset = Pen.objects.all()
    return queryset.annotate(
        occupancy=Count('animals', filter=Q(animals__status=Animal.Status.ACTIVE))
    )

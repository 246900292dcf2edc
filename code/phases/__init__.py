from .growth import run_growth_phase
from .classification import (
    run_find_end_rooms,
    run_pick_boss_room,
    run_pick_item_rooms,
    run_pick_shop_room,
)
from .secret_rooms import run_compute_secret_chances, run_pick_secret_rooms
from .super_secret import run_find_super_candidates, run_pick_super_secret_room

__all__ = [
    "run_growth_phase",
    "run_find_end_rooms",
    "run_pick_boss_room",
    "run_pick_shop_room",
    "run_pick_item_rooms",
    "run_compute_secret_chances",
    "run_pick_secret_rooms",
    "run_find_super_candidates",
    "run_pick_super_secret_room",
]

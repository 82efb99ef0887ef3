from .bbb import BBBSummary, compute_bbb, empty_hole_awards
from .netting import (
    Settlement,
    SettlementLine,
    build_transfers,
    correct_drift,
    settle_net,
    split_cents,
)
from .progress import (
    completion_by_hole,
    entered_stroke_count_by_hole,
    first_incomplete_hole,
    hole_is_complete,
    last_completed_hole,
    next_incomplete_hole,
    round_is_complete,
)
from .round import (
    AWARD_SLOTS,
    HOLES,
    BBBGame,
    DomainValidationError,
    GameType,
    GameVariant,
    HoleAwards,
    Player,
    Round,
    SkinsGame,
    WolfGame,
    normalize_player,
    unique_preserve_order,
    validate_round,
)
from .settlement import (
    bbb_net,
    settle_bbb,
    settle_round,
    settle_skins,
    settle_wolf,
    skins_net,
    wolf_net,
)
from .skins import SkinsHoleResult, SkinsSummary, compute_skins
from .wolf import WolfHoleResult, WolfHoleStatus, WolfSummary, compute_wolf, wolf_for_hole

__all__ = [
    "AWARD_SLOTS",
    "BBBGame",
    "BBBSummary",
    "DomainValidationError",
    "GameType",
    "GameVariant",
    "HOLES",
    "HoleAwards",
    "Player",
    "Round",
    "Settlement",
    "SettlementLine",
    "SkinsGame",
    "SkinsHoleResult",
    "SkinsSummary",
    "WolfGame",
    "WolfHoleResult",
    "WolfHoleStatus",
    "WolfSummary",
    "bbb_net",
    "build_transfers",
    "completion_by_hole",
    "compute_bbb",
    "compute_skins",
    "compute_wolf",
    "correct_drift",
    "empty_hole_awards",
    "entered_stroke_count_by_hole",
    "first_incomplete_hole",
    "hole_is_complete",
    "last_completed_hole",
    "next_incomplete_hole",
    "normalize_player",
    "round_is_complete",
    "settle_bbb",
    "settle_net",
    "settle_round",
    "settle_skins",
    "settle_wolf",
    "skins_net",
    "split_cents",
    "unique_preserve_order",
    "validate_round",
    "wolf_for_hole",
    "wolf_net",
]

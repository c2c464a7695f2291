from .balances import aggregate_balances, check_conservation
from .engine import EngineConfig, GameResult, SettlementResult, settle_round
from .errors import ConservationError, SettlementError
from .nassau import NassauResult, NassauSegment, calculate_nassau
from .per_stroke import PerStrokeResult, calculate_per_stroke
from .rounds import Player, players_from_round
from .settlement import Transfer, settle
from .skins import CarryPolicy, SkinDetail, SkinsResult, calculate_skins
from .strokes import StrokeLedger, parse_strokes, stroke_of, total_of
from .wagers import NassauWager, StakeWager, WagerConfig

__all__ = [
    "CarryPolicy",
    "ConservationError",
    "EngineConfig",
    "GameResult",
    "NassauResult",
    "NassauSegment",
    "NassauWager",
    "PerStrokeResult",
    "Player",
    "SettlementError",
    "SettlementResult",
    "SkinDetail",
    "SkinsResult",
    "StakeWager",
    "StrokeLedger",
    "Transfer",
    "WagerConfig",
    "aggregate_balances",
    "calculate_nassau",
    "calculate_per_stroke",
    "calculate_skins",
    "check_conservation",
    "parse_strokes",
    "players_from_round",
    "settle",
    "settle_round",
    "stroke_of",
    "total_of",
]

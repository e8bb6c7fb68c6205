"""Game session setup and post-battle bookkeeping.

There is no global game-state instance. ``new_game`` returns a
``GameState`` the caller owns and passes into the other engine
functions.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from forest_heroes.core.config import GameSettings, get_settings
from forest_heroes.core.logging import get_logger
from forest_heroes.data.items import STARTER_ITEMS
from forest_heroes.engine.character import LevelUpResult, add_xp, base_stats_for
from forest_heroes.engine.dice import DiceRoller
from forest_heroes.engine.inventory import add_item, equip_item
from forest_heroes.engine.loot import (
    LootDrop,
    calculate_total_gold,
    calculate_total_xp,
    generate_loot,
)
from forest_heroes.models.enums import AIType
from forest_heroes.models.game_state import GameState, Position
from forest_heroes.models.inventory import Inventory
from forest_heroes.models.monster import Monster
from forest_heroes.models.player import Player
from forest_heroes.models.progression import get_level_data


logger = get_logger(__name__)

STARTER_EQUIPMENT: tuple[str, ...] = ("wooden_sword", "leather_armor")


@dataclass
class BattleRewards:
    """What a won battle granted.

    Attributes:
        xp: Experience granted.
        gold: Gold granted, boss bonuses included.
        loot: Drops that were rolled.
        level_up: Result of applying the XP.
        lost_loot: Drops that did not fit in the inventory.
    """

    xp: int
    gold: int
    loot: list[LootDrop]
    level_up: LevelUpResult
    lost_loot: list[LootDrop] = field(default_factory=list)


def create_player(name: str = "Hero") -> Player:
    """A fresh level-1 player at full HP and MP."""
    first = get_level_data(1)
    second = get_level_data(2)
    return Player(
        name=name,
        level=1,
        xp=0,
        xp_to_next=second.xp_required if second is not None else 0,
        base_stats=base_stats_for(first),
        current_hp=first.max_hp,
        current_mp=first.max_mp,
    )


def new_game(settings: GameSettings | None = None) -> GameState:
    """Start a new game.

    The player starts at level 1 with the starter items, the starter
    weapon and armor already equipped.

    Args:
        settings: Game settings, the cached application settings if omitted.

    Returns:
        A new GameState owned by the caller.
    """
    settings = settings or get_settings().game

    player = create_player(settings.player_name)
    inventory = Inventory(max_slots=settings.inventory_max_slots)

    for item_id, quantity in STARTER_ITEMS:
        add_item(inventory, item_id, quantity)
    for item_id in STARTER_EQUIPMENT:
        equip_item(inventory, player, item_id)

    state = GameState(
        player=player,
        inventory=inventory,
        current_map=settings.starting_map,
        player_position=Position(
            x=settings.starting_position_x,
            y=settings.starting_position_y,
        ),
        gold=settings.starting_gold,
    )
    logger.info("New game started", player=player.name, gold=state.gold)
    return state


def apply_victory(
    state: GameState,
    enemies: Sequence[Monster],
    *,
    roller: DiceRoller | None = None,
    settings: GameSettings | None = None,
    boss_gold_bonus: int | None = None,
) -> BattleRewards:
    """Grant the rewards of a won battle.

    Loot goes into the inventory, gold (plus the boss bonus for every boss
    in the party) is added, XP is applied and the win is counted. Drops
    that do not fit are reported in ``lost_loot``.

    Args:
        state: Game state to update.
        enemies: The defeated party.
        roller: Random source for loot, the shared default roller if omitted.
        settings: Game settings, the cached application settings if omitted.
        boss_gold_bonus: Gold per boss, overriding ``settings.boss_gold_bonus``.

    Returns:
        The rewards that were granted.
    """
    xp = calculate_total_xp(enemies)
    bosses = sum(1 for enemy in enemies if enemy.ai_type is AIType.BOSS)
    if boss_gold_bonus is None:
        settings = settings or get_settings().game
        boss_gold_bonus = settings.boss_gold_bonus
    gold = calculate_total_gold(enemies) + bosses * boss_gold_bonus
    loot = generate_loot(enemies, roller)

    lost: list[LootDrop] = []
    for drop in loot:
        if not add_item(state.inventory, drop.item_id, drop.quantity):
            lost.append(drop)

    state.add_gold(gold)
    level_up = add_xp(state.player, xp)
    state.increment_battles_won()

    logger.info(
        "Victory rewards applied",
        xp=xp,
        gold=gold,
        loot=len(loot),
        lost=len(lost),
        leveled_up=level_up.leveled_up,
    )
    return BattleRewards(xp=xp, gold=gold, loot=loot, level_up=level_up, lost_loot=lost)


def apply_defeat(state: GameState) -> None:
    """Restore the player so the battle can be retried."""
    state.player.full_restore()
    logger.info("Defeat, player restored", player=state.player.name)


__all__ = [
    "STARTER_EQUIPMENT",
    "BattleRewards",
    "create_player",
    "new_game",
    "apply_victory",
    "apply_defeat",
]

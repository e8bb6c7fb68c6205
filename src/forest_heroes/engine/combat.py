"""Turn-based combat resolution.

``CombatSystem`` resolves one battle between the player and a party of
monsters. The caller drives turn order: one ``execute_player_action`` call,
then an ``execute_enemy_turn`` for each living enemy (or a single
``run_enemy_phase``). Every call returns exactly one ``CombatEvent``
describing what happened, with the termination fields set on the event
that ended the battle.

The engine holds references to the player and the enemy list it was given
and mutates their HP/MP in place. It owns only the transient battle state:
the defending flag and the result.

Example:
    >>> combat = CombatSystem(player, [create_monster("slime")])
    >>> event = combat.execute_player_action(PlayerAction.ATTACK_NORMAL)
    >>> if not event.combat_ended:
    ...     combat.run_enemy_phase()
"""

from __future__ import annotations

import math

from forest_heroes.core.constants import (
    BOSS_ENRAGE_THRESHOLD,
    BOSS_ENRAGED_FIRE_BREATH_CHANCE,
    BOSS_FIRE_BREATH_CHANCE,
    BOSS_HEAL_FRACTION,
    BOSS_HEAL_THRESHOLD,
    DEFEND_DAMAGE_FACTOR,
    ENEMY_ATTACK_ACCURACY,
    FIRE_BREATH_ATK_MULTIPLIER,
    FIRE_BREATH_DEF_FACTOR,
    FIRE_BREATH_DEFEND_FACTOR,
    FIRE_SPELL_BASE_DAMAGE,
    FIRE_SPELL_DAMAGE_PER_LEVEL,
    FIRE_SPELL_DEF_FACTOR,
    FIRE_SPELL_MP_COST,
    HEAL_SPELL_AMOUNT_PER_LEVEL,
    HEAL_SPELL_BASE_AMOUNT,
    HEAL_SPELL_MP_COST,
    HEALING_ITEM_AMOUNT,
    HEAVY_ATTACK_ACCURACY,
    HEAVY_ATTACK_MULTIPLIER,
    MIN_DAMAGE,
    NORMAL_ATTACK_ACCURACY,
)
from forest_heroes.core.exceptions import CombatError
from forest_heroes.core.logging import get_logger
from forest_heroes.engine.dice import DiceRoller, get_default_roller
from forest_heroes.engine.inventory import get_total_atk, get_total_def
from forest_heroes.models.combat import CombatEvent
from forest_heroes.models.enums import AIType, CombatResult, EnemyAction, PlayerAction
from forest_heroes.models.monster import Monster
from forest_heroes.models.player import Player


logger = get_logger(__name__)

PLAYER_ID = "player"

_TARGETED_ACTIONS = frozenset(
    {PlayerAction.ATTACK_NORMAL, PlayerAction.ATTACK_HEAVY, PlayerAction.SPELL_FIRE}
)


def calculate_physical_damage(atk: int, defense: int, modifier: float = 1.0) -> int:
    """``max(1, floor(atk * modifier - defense))``."""
    return max(MIN_DAMAGE, math.floor(atk * modifier - defense))


class CombatSystem:
    """State machine for a single battle.

    Attributes:
        player: The player, mutated in place.
        enemies: The enemy party in battle order, mutated in place.
    """

    def __init__(
        self,
        player: Player,
        enemies: list[Monster],
        *,
        roller: DiceRoller | None = None,
    ) -> None:
        """Start a battle.

        Args:
            player: The player character.
            enemies: Monster instances to fight. Instances of the same
                template are told apart by position.
            roller: Random source, the shared default roller if omitted.

        Raises:
            CombatError: If ``enemies`` is empty.
        """
        if not enemies:
            raise CombatError("A battle needs at least one enemy")

        self.player = player
        self.enemies = enemies
        self._roller = roller or get_default_roller()
        self._is_defending = False
        self._combat_ended = False
        self._combat_result: CombatResult | None = None

        logger.info(
            "Battle started",
            player=player.name,
            enemies=[enemy.id for enemy in enemies],
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def is_defending(self) -> bool:
        return self._is_defending

    def is_combat_ended(self) -> bool:
        return self._combat_ended

    def get_combat_result(self) -> CombatResult | None:
        return self._combat_result

    def get_alive_enemies(self) -> list[Monster]:
        """Living enemies in battle order."""
        return [enemy for enemy in self.enemies if enemy.is_alive]

    def first_alive_enemy_index(self) -> int | None:
        """Index of the first living enemy, used as the default target."""
        for index, enemy in enumerate(self.enemies):
            if enemy.is_alive:
                return index
        return None

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def execute_player_action(
        self,
        action: PlayerAction | str,
        target_index: int = 0,
    ) -> CombatEvent:
        """Resolve the player's action for this turn.

        Args:
            action: The chosen action.
            target_index: Enemy to target. Only used by attacks and Fire.

        Returns:
            The resolved CombatEvent. Misses and insufficient MP are
            reported with ``hit=False``.

        Raises:
            CombatError: If the battle is over, the action is unknown, or a
                targeted action names a missing or defeated enemy.
        """
        self._ensure_active(PLAYER_ID, str(action))
        try:
            action = PlayerAction(action)
        except ValueError as exc:
            raise CombatError(
                f"Unknown player action: {action}",
                combatant_id=PLAYER_ID,
                action=str(action),
            ) from exc

        target = self._enemy_at(target_index, action) if action in _TARGETED_ACTIONS else None

        if action is PlayerAction.ATTACK_NORMAL:
            event = self._attack_normal(target)
        elif action is PlayerAction.ATTACK_HEAVY:
            event = self._attack_heavy(target)
        elif action is PlayerAction.DEFEND:
            event = self._defend()
        elif action is PlayerAction.ITEM_HEAL:
            event = self._use_healing_item()
        elif action is PlayerAction.SPELL_FIRE:
            event = self._cast_fire(target)
        elif action is PlayerAction.SPELL_HEAL:
            event = self._cast_heal()
        else:
            raise CombatError(
                f"Unhandled player action: {action}",
                combatant_id=PLAYER_ID,
                action=action.value,
            )

        self._log_event(event)
        return event

    def execute_enemy_turn(self, enemy_index: int) -> CombatEvent:
        """Let one enemy choose and resolve its action.

        Raises:
            CombatError: If the battle is over or the enemy is missing or
                already defeated.
        """
        self._ensure_active(f"enemy[{enemy_index}]", "enemy_turn")
        enemy = self._enemy_at(enemy_index, "enemy_turn")

        action = self.select_enemy_action(enemy)
        if action is EnemyAction.ATTACK:
            event = self._enemy_attack(enemy)
        elif action is EnemyAction.FIRE_BREATH:
            event = self._enemy_fire_breath(enemy)
        elif action is EnemyAction.BOSS_HEAL:
            event = self._boss_heal(enemy)
        else:
            raise CombatError(
                f"Unhandled enemy action: {action}",
                combatant_id=enemy.id,
                action=str(action),
            )

        self._log_event(event)
        return event

    def run_enemy_phase(self) -> list[CombatEvent]:
        """Give every living enemy one turn, in order.

        Stops as soon as an event ends the battle.
        """
        events: list[CombatEvent] = []
        for index, enemy in enumerate(self.enemies):
            if self._combat_ended:
                break
            if not enemy.is_alive:
                continue
            events.append(self.execute_enemy_turn(index))
        return events

    # -------------------------------------------------------------------------
    # Enemy AI
    # -------------------------------------------------------------------------

    def select_enemy_action(self, enemy: Monster) -> EnemyAction:
        """Choose an action for an enemy based on its AI type.

        Bosses heal once when below 30% HP, then breathe fire more often
        below half HP. Every other AI type always attacks.
        """
        if enemy.ai_type is AIType.BOSS:
            if (
                enemy.current_hp < enemy.stats.max_hp * BOSS_HEAL_THRESHOLD
                and not enemy.has_healed
            ):
                return EnemyAction.BOSS_HEAL

            if enemy.hp_fraction < BOSS_ENRAGE_THRESHOLD:
                breath_chance = BOSS_ENRAGED_FIRE_BREATH_CHANCE
            else:
                breath_chance = BOSS_FIRE_BREATH_CHANCE
            if self._roller.chance(breath_chance):
                return EnemyAction.FIRE_BREATH
            return EnemyAction.ATTACK

        return EnemyAction.ATTACK

    # -------------------------------------------------------------------------
    # Player actions
    # -------------------------------------------------------------------------

    def _attack_normal(self, target: Monster) -> CombatEvent:
        action = PlayerAction.ATTACK_NORMAL
        if not self._roller.chance(NORMAL_ATTACK_ACCURACY):
            return self._miss(action, target, f"{self.player.name} attacks... but misses!")

        damage = calculate_physical_damage(get_total_atk(self.player), target.stats.defense)
        target.take_damage(damage)
        return self._enemy_hit_event(
            action,
            target,
            damage,
            f"{self.player.name} attacks {target.name}! {damage} damage.",
        )

    def _attack_heavy(self, target: Monster) -> CombatEvent:
        action = PlayerAction.ATTACK_HEAVY
        if not self._roller.chance(HEAVY_ATTACK_ACCURACY):
            return self._miss(
                action, target, f"{self.player.name} swings wildly... but misses!"
            )

        damage = calculate_physical_damage(
            get_total_atk(self.player),
            target.stats.defense,
            HEAVY_ATTACK_MULTIPLIER,
        )
        target.take_damage(damage)
        return self._enemy_hit_event(
            action,
            target,
            damage,
            f"{self.player.name} lands a heavy blow on {target.name}! {damage} damage!",
        )

    def _defend(self) -> CombatEvent:
        self._is_defending = True
        return self._build_event(
            actor=PLAYER_ID,
            action=PlayerAction.DEFEND,
            target=PLAYER_ID,
            resulting_hp=self.player.current_hp,
            message=f"{self.player.name} takes a defensive stance!",
        )

    def _use_healing_item(self) -> CombatEvent:
        healed = self.player.heal_hp(HEALING_ITEM_AMOUNT)
        return self._build_event(
            actor=PLAYER_ID,
            action=PlayerAction.ITEM_HEAL,
            target=PLAYER_ID,
            healing=healed,
            resulting_hp=self.player.current_hp,
            message=f"{self.player.name} drinks a healing potion! +{healed} HP.",
        )

    def _cast_fire(self, target: Monster) -> CombatEvent:
        action = PlayerAction.SPELL_FIRE
        if not self.player.spend_mp(FIRE_SPELL_MP_COST):
            return self._miss(action, target, "Not enough MP to cast Fire!")

        damage = max(
            MIN_DAMAGE,
            FIRE_SPELL_BASE_DAMAGE
            + self.player.level * FIRE_SPELL_DAMAGE_PER_LEVEL
            - math.floor(target.stats.defense * FIRE_SPELL_DEF_FACTOR),
        )
        target.take_damage(damage)
        return self._enemy_hit_event(
            action,
            target,
            damage,
            f"{self.player.name} casts Fire on {target.name}! {damage} magic damage.",
            mp_cost=FIRE_SPELL_MP_COST,
        )

    def _cast_heal(self) -> CombatEvent:
        action = PlayerAction.SPELL_HEAL
        if not self.player.spend_mp(HEAL_SPELL_MP_COST):
            return self._build_event(
                actor=PLAYER_ID,
                action=action,
                target=PLAYER_ID,
                hit=False,
                resulting_hp=self.player.current_hp,
                message="Not enough MP to cast Heal!",
            )

        amount = HEAL_SPELL_BASE_AMOUNT + self.player.level * HEAL_SPELL_AMOUNT_PER_LEVEL
        healed = self.player.heal_hp(amount)
        return self._build_event(
            actor=PLAYER_ID,
            action=action,
            target=PLAYER_ID,
            healing=healed,
            mp_cost=HEAL_SPELL_MP_COST,
            resulting_hp=self.player.current_hp,
            message=f"{self.player.name} casts Heal! +{healed} HP.",
        )

    # -------------------------------------------------------------------------
    # Enemy actions
    # -------------------------------------------------------------------------

    def _enemy_attack(self, enemy: Monster) -> CombatEvent:
        action = EnemyAction.ATTACK
        if not self._roller.chance(ENEMY_ATTACK_ACCURACY):
            return self._build_event(
                actor=enemy.id,
                action=action,
                target=PLAYER_ID,
                hit=False,
                resulting_hp=self.player.current_hp,
                message=f"{enemy.name} attacks... but misses!",
            )

        damage = calculate_physical_damage(enemy.stats.atk, get_total_def(self.player))
        if self._is_defending:
            damage = math.floor(damage * DEFEND_DAMAGE_FACTOR)
            self._is_defending = False

        self.player.take_damage(damage)
        return self._player_hit_event(
            enemy, action, damage, f"{enemy.name} attacks! {damage} damage."
        )

    def _enemy_fire_breath(self, enemy: Monster) -> CombatEvent:
        damage = max(
            MIN_DAMAGE,
            math.floor(
                enemy.stats.atk * FIRE_BREATH_ATK_MULTIPLIER
                - get_total_def(self.player) * FIRE_BREATH_DEF_FACTOR
            ),
        )
        if self._is_defending:
            damage = math.floor(damage * FIRE_BREATH_DEFEND_FACTOR)
            self._is_defending = False

        self.player.take_damage(damage)
        return self._player_hit_event(
            enemy,
            EnemyAction.FIRE_BREATH,
            damage,
            f"{enemy.name} breathes fire! {damage} burning damage!",
        )

    def _boss_heal(self, enemy: Monster) -> CombatEvent:
        healed = enemy.heal(math.floor(enemy.stats.max_hp * BOSS_HEAL_FRACTION))
        enemy.has_healed = True
        return self._build_event(
            actor=enemy.id,
            action=EnemyAction.BOSS_HEAL,
            target=enemy.id,
            healing=healed,
            resulting_hp=enemy.current_hp,
            message=f"{enemy.name} tends its wounds! +{healed} HP.",
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _ensure_active(self, actor: str, action: str) -> None:
        if self._combat_ended:
            raise CombatError(
                "The battle has already ended",
                combatant_id=actor,
                action=action,
                details={"result": str(self._combat_result)},
            )

    def _enemy_at(self, index: int, action: str) -> Monster:
        if not 0 <= index < len(self.enemies):
            raise CombatError(
                f"No enemy at index {index}",
                action=str(action),
                details={"index": index, "enemy_count": len(self.enemies)},
            )
        enemy = self.enemies[index]
        if not enemy.is_alive:
            raise CombatError(
                f"{enemy.name} is already defeated",
                combatant_id=enemy.id,
                action=str(action),
                details={"index": index},
            )
        return enemy

    def _miss(self, action: PlayerAction, target: Monster, message: str) -> CombatEvent:
        return self._build_event(
            actor=PLAYER_ID,
            action=action,
            target=target.id,
            hit=False,
            resulting_hp=target.current_hp,
            message=message,
        )

    def _enemy_hit_event(
        self,
        action: PlayerAction,
        target: Monster,
        damage: int,
        message: str,
        *,
        mp_cost: int = 0,
    ) -> CombatEvent:
        if not target.is_alive and not self.get_alive_enemies():
            self._end(CombatResult.VICTORY)
        return self._build_event(
            actor=PLAYER_ID,
            action=action,
            target=target.id,
            damage=damage,
            mp_cost=mp_cost,
            resulting_hp=target.current_hp,
            message=message,
        )

    def _player_hit_event(
        self,
        enemy: Monster,
        action: EnemyAction,
        damage: int,
        message: str,
    ) -> CombatEvent:
        if self.player.is_defeated:
            self._end(CombatResult.DEFEAT)
        return self._build_event(
            actor=enemy.id,
            action=action,
            target=PLAYER_ID,
            damage=damage,
            resulting_hp=self.player.current_hp,
            message=message,
        )

    def _end(self, result: CombatResult) -> None:
        self._combat_ended = True
        self._combat_result = result
        logger.info("Battle ended", result=result.value, player_hp=self.player.current_hp)

    def _build_event(
        self,
        *,
        actor: str,
        action: PlayerAction | EnemyAction,
        target: str | None,
        hit: bool = True,
        damage: int = 0,
        healing: int = 0,
        mp_cost: int = 0,
        resulting_hp: int | None = None,
        message: str = "",
    ) -> CombatEvent:
        return CombatEvent(
            actor=actor,
            action=action.value,
            target=target,
            hit=hit,
            damage=damage,
            healing=healing,
            mp_cost=mp_cost,
            resulting_hp=resulting_hp,
            message=message,
            combat_ended=self._combat_ended,
            combat_result=self._combat_result,
        )

    def _log_event(self, event: CombatEvent) -> None:
        logger.debug(
            "Combat action resolved",
            actor=event.actor,
            action=event.action,
            target=event.target,
            hit=event.hit,
            damage=event.damage,
            healing=event.healing,
            resulting_hp=event.resulting_hp,
        )


__all__ = ["PLAYER_ID", "CombatSystem", "calculate_physical_damage"]

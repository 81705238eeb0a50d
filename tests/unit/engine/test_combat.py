"""Tests for combat resolution."""

from __future__ import annotations

from typing import Any

from endless_realms.engine.combat import CombatResolver, experience_reward
from endless_realms.models.entities import Position, create_monster, create_player
from endless_realms.models.stats import EffectiveStats, StatBlock


def _effective(**overrides: int) -> EffectiveStats:
    values = {"hp": 100, "max_hp": 100, "attack": 10, "defense": 2, "crit_rate": 0}
    values.update(overrides)
    return EffectiveStats(stats=StatBlock(**values))


class TestResolveAttack:
    """Tests for a single strike."""

    def test_base_damage(self, scripted_roller: Any) -> None:
        resolver = CombatResolver(scripted_roller)
        dog = create_monster("wild_dog", 1, Position.of(1, 0))  # hp 25, def 1

        strike = resolver.resolve_attack(_effective().stats, dog)

        assert strike.damage_dealt == 9
        assert not strike.was_critical
        assert dog.stats.hp == 16

    def test_minimum_damage(self, scripted_roller: Any) -> None:
        resolver = CombatResolver(scripted_roller)
        tiger = create_monster("tiger_king", 10, Position.of(1, 0))  # def 15

        strike = resolver.resolve_attack(_effective(attack=3).stats, tiger)

        assert strike.damage_dealt == 1

    def test_critical_and_variance(self, scripted_roller: Any) -> None:
        """Crit applies before variance: floor(9 * 1.5) + 2."""
        resolver = CombatResolver(scripted_roller)
        scripted_roller.variance_value = 2
        dog = create_monster("wild_dog", 1, Position.of(1, 0))

        strike = resolver.resolve_attack(_effective(crit_rate=100).stats, dog)

        assert strike.was_critical
        assert strike.damage_dealt == 15


class TestPlayerAttack:
    def test_lifesteal_capped(self, scripted_roller: Any) -> None:
        resolver = CombatResolver(scripted_roller)
        player = create_player()
        player.stats.hp = 98
        dog = create_monster("wild_dog", 1, Position.of(1, 0))

        outcome = resolver.player_attack(player, _effective(lifesteal=50), dog)

        assert outcome.damage_dealt == 9
        assert outcome.healed == 2
        assert player.stats.hp == 100

    def test_double_strike(self, scripted_roller: Any) -> None:
        resolver = CombatResolver(scripted_roller)
        scripted_roller.chance_queue = [True]
        tiger = create_monster("tiger_king", 1, Position.of(1, 0))  # hp 110, def 6

        outcome = resolver.player_attack(create_player(), _effective(attack_speed=130), tiger)

        assert outcome.strikes == 2
        assert outcome.damage_dealt == 8
        assert tiger.stats.hp == 102
        assert 30 in scripted_roller.chance_calls

    def test_no_extra_strike_at_base_speed(self, scripted_roller: Any) -> None:
        resolver = CombatResolver(scripted_roller)
        scripted_roller.chance_default = True
        tiger = create_monster("tiger_king", 1, Position.of(1, 0))

        outcome = resolver.player_attack(create_player(), _effective(), tiger)

        assert outcome.strikes == 1

    def test_no_extra_strike_on_dead_defender(self, scripted_roller: Any) -> None:
        resolver = CombatResolver(scripted_roller)
        scripted_roller.chance_default = True
        dog = create_monster("wild_dog", 1, Position.of(1, 0))
        dog.stats.hp = 3

        outcome = resolver.player_attack(
            create_player(), _effective(attack_speed=200, crit_rate=0), dog
        )

        assert outcome.strikes == 1
        assert outcome.defender_defeated


class TestMonsterAttack:
    def test_hit(self, scripted_roller: Any) -> None:
        resolver = CombatResolver(scripted_roller)
        scripted_roller.variance_value = 1
        player = create_player()
        bandit = create_monster("bandit", 1, Position.of(1, 0))  # atk 10

        outcome = resolver.monster_attack(bandit, player, _effective())

        assert outcome.damage_dealt == 9
        assert player.stats.hp == 91
        assert not outcome.dodged

    def test_dodge_negates(self, scripted_roller: Any) -> None:
        resolver = CombatResolver(scripted_roller)
        scripted_roller.chance_default = True
        player = create_player()
        bandit = create_monster("bandit", 1, Position.of(1, 0))

        outcome = resolver.monster_attack(bandit, player, _effective(dodge=25))

        assert outcome.dodged
        assert outcome.damage_dealt == 0
        assert player.stats.hp == 100

    def test_uses_effective_defense(self, scripted_roller: Any) -> None:
        resolver = CombatResolver(scripted_roller)
        player = create_player()
        dog = create_monster("wild_dog", 1, Position.of(1, 0))  # atk 6

        outcome = resolver.monster_attack(dog, player, _effective(defense=20))

        assert outcome.damage_dealt == 1


def test_experience_reward() -> None:
    assert experience_reward(create_monster("bandit", 3, Position.of(0, 1))) == 25


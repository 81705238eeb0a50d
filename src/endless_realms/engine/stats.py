"""Stat aggregation: base stats plus equipment.

effective_stats is a pure function. It copies the base block, adds every
bonus an equipped item actually sets (None means "no bonus" and is
skipped), and collects the union of equipped visual tags.
"""

from __future__ import annotations

from endless_realms.models.items import Equipment
from endless_realms.models.stats import EQUIPMENT_BONUS_FIELDS, EffectiveStats, StatBlock


def effective_stats(base: StatBlock, equipment: Equipment) -> EffectiveStats:
    """Fold equipped items into a base stat block.

    Args:
        base: The player's base stats. Special attributes already hold
            their baselines, so item bonuses add on top of them.
        equipment: Currently equipped items.

    Returns:
        A new EffectiveStats; neither argument is modified.
    """
    totals = {name: getattr(base, name) for name in EQUIPMENT_BONUS_FIELDS}
    tags = set()

    for item in equipment.equipped():
        for name, bonus in item.stats.equipment_bonuses().items():
            totals[name] += bonus
        tags.update(item.tags)

    return EffectiveStats(
        stats=base.model_copy(update=totals),
        tags=frozenset(tags),
    )


__all__ = ["effective_stats"]

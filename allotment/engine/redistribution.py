"""Pure helpers for splitting an amount across siblings with floors."""

from __future__ import annotations

from typing import Mapping


def proportional_split(total: float, weights: Mapping[str, float]) -> dict[str, float]:
    """Split ``total`` by weight; evenly when every weight is zero."""
    if not weights:
        return {}

    weight_total = sum(max(weight, 0.0) for weight in weights.values())
    if weight_total <= 0:
        even = total / len(weights)
        return {key: even for key in weights}

    return {key: total * max(weight, 0.0) / weight_total for key, weight in weights.items()}


def distribute_with_floors(
    total: float,
    weights: Mapping[str, float],
    floors: Mapping[str, float],
) -> dict[str, float]:
    """
    Split ``total`` by weight, then lift anything under its floor.

    Pass one computes the naive proportional amounts and pins every entry
    that falls below its floor at that floor, summing the shortfall. Pass two
    takes the shortfall from the unpinned entries, weighted by how far each
    sits above its own floor. Lowering an entry by its weighted share never
    pushes it under its floor as long as the floors fit inside ``total``, so
    one pass is enough and the result sums to ``total``.

    Args:
        total: Amount to distribute
        weights: Relative weight per key (current amounts or default shares)
        floors: Minimum amount per key (missing keys have no floor)

    Returns:
        Amount per key, in the order of ``weights``
    """
    proposed = proportional_split(total, weights)

    result: dict[str, float] = {}
    deficit = 0.0
    surplus = 0.0
    above_floor: list[str] = []

    for key, amount in proposed.items():
        floor = floors.get(key, 0.0)
        if amount < floor:
            deficit += floor - amount
            result[key] = floor
        else:
            above_floor.append(key)
            surplus += amount - floor
            result[key] = amount

    if deficit > 0 and surplus > 0:
        for key in above_floor:
            floor = floors.get(key, 0.0)
            excess = result[key] - floor
            reduction = (excess / surplus) * deficit
            result[key] = max(floor, result[key] - reduction)

    return absorb_residual(result, total, floors)


def absorb_residual(amounts: dict[str, float], total: float, floors: Mapping[str, float]) -> dict[str, float]:
    """
    Hand the float rounding residual to the last entry above its floor.

    Proportional splits sum to ``total`` only up to rounding; after this
    they sum to it exactly or within one ulp. Entries sitting on their floor
    are left alone.
    """
    if not amounts:
        return amounts

    residual = total - sum(amounts.values())
    if residual == 0:
        return amounts

    keys = list(amounts)
    target = keys[-1]
    for key in reversed(keys):
        if amounts[key] > floors.get(key, 0.0):
            target = key
            break

    amounts[target] += residual
    return amounts
